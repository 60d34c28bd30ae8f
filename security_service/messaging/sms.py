from security_service.messaging.base import Message, MessagingType
from security_service.messaging.gateway import GatewayMessagingService


class SmsMessagingService(GatewayMessagingService):
    """SMS delivery through the configured SMS gateway."""

    @property
    def channel(self) -> MessagingType:
        return MessagingType.SMS

    def payload(self, message: Message) -> dict:
        return {"to": message.recipient.phone_number, "text": message.body}
