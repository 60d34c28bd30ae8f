from security_service.messaging.base import Message, MessagingType
from security_service.messaging.gateway import GatewayMessagingService


class WhatsAppMessagingService(GatewayMessagingService):
    """WhatsApp Business API delivery through the configured gateway."""

    @property
    def channel(self) -> MessagingType:
        return MessagingType.WHATSAPP

    def payload(self, message: Message) -> dict:
        return {
            "messaging_product": "whatsapp",
            "to": message.recipient.phone_number,
            "type": "text",
            "text": {"body": message.body},
        }
