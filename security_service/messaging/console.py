import logging
from security_service.messaging.base import Message, MessagingService, MessagingType

logger = logging.getLogger("security-service")


class ConsoleMessagingService(MessagingService):
    """Dev/testing messaging service that logs messages to stdout."""

    @property
    def channel(self) -> MessagingType | None:
        return None

    def send(self, message: Message) -> bool:
        recipient = message.recipient
        logger.info(
            "═══════════════════════════════════════════\n"
            "  %s\n"
            "  Recipient: %s\n"
            "  Body:      %s\n"
            "═══════════════════════════════════════════",
            message.subject,
            recipient.phone_number or recipient.email or recipient.device_token,
            message.body,
        )
        return True
