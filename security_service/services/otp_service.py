import logging
import secrets
import uuid
from typing import Callable

from security_service.clock import now_millis
from security_service.errors import (
    DispatchFailureError,
    InvalidChannelTypeError,
    OtpCodeMismatchError,
    OtpExpiredError,
    OtpNotFoundError,
)
from security_service.messaging.base import Message, MessagingError, MessagingType, Party
from security_service.messaging.provider import MessagingServiceProvider
from security_service.models.records import OtpRecord
from security_service.storage.repository import Repository

logger = logging.getLogger("security-service")

SUBJECT = "[Wutsi] Verification code"
BODY = "Your verification code: {code}"


def generate_code(length: int = 6) -> str:
    """Generate a random numeric OTP code."""
    return "".join(str(secrets.randbelow(10)) for _ in range(length))


def parse_type(value: str) -> MessagingType:
    try:
        return MessagingType[value]
    except KeyError:
        raise InvalidChannelTypeError(f"Invalid address type: {value}") from None


def recipient_for(type: MessagingType, address: str) -> Party:
    if type == MessagingType.PUSH_NOTIFICATION:
        return Party(device_token=address)
    if type == MessagingType.EMAIL:
        return Party(email=address)
    return Party(phone_number=address)


class OtpService:
    """Issues one-time passcodes and verifies them against the store."""

    def __init__(
        self,
        repository: Repository[OtpRecord],
        messaging: MessagingServiceProvider,
        ttl_minutes: int = 15,
        code_length: int = 6,
        single_use: bool = False,
        clock: Callable[[], int] = now_millis,
    ):
        self.repository = repository
        self.messaging = messaging
        self.ttl_millis = ttl_minutes * 60 * 1000
        self.code_length = code_length
        self.single_use = single_use
        self.clock = clock

    def create(self, address: str, type: str) -> OtpRecord:
        """
        Generate, store and send an OTP. Returns the stored record.

        The record is written before dispatch and is kept when dispatch fails,
        in which case DispatchFailureError carries its token.
        """
        channel = parse_type(type)

        created = self.clock()
        otp = OtpRecord(
            token=str(uuid.uuid4()),
            code=generate_code(self.code_length),
            address=address,
            channel=channel.name,
            expires=created + self.ttl_millis,
            created=created,
        )
        self.repository.put(otp)

        message = Message(
            recipient=recipient_for(channel, address),
            subject=SUBJECT,
            body=BODY.format(code=otp.code),
        )
        try:
            sent = self.messaging.get(channel).send(message)
        except MessagingError as e:
            logger.error("Failed to send OTP %s via %s: %s", otp.token, channel.name, e)
            sent = False

        if not sent:
            logger.error("Failed to send OTP %s via %s", otp.token, channel.name)
            raise DispatchFailureError("Failed to send OTP", token=otp.token)

        logger.info("OTP %s sent via %s", otp.token, channel.name)
        return otp

    def verify(self, token: str, code: str) -> None:
        """Verify an OTP code. Returns on success, raises on failure."""
        otp = self.repository.get(token)
        if otp is None:
            raise OtpNotFoundError(f"OTP not found: {token}")

        if self.clock() > otp.expires:
            logger.info("OTP %s expired", token)
            raise OtpExpiredError("Verification code expired")

        if otp.code != code:
            logger.info("OTP %s code mismatch", token)
            raise OtpCodeMismatchError("Invalid verification code")

        if self.single_use:
            self.repository.delete(token)
