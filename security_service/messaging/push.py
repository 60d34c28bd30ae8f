from security_service.messaging.base import Message, MessagingType
from security_service.messaging.gateway import GatewayMessagingService


class PushNotificationMessagingService(GatewayMessagingService):
    """Push notification delivery to a device token."""

    @property
    def channel(self) -> MessagingType:
        return MessagingType.PUSH_NOTIFICATION

    def payload(self, message: Message) -> dict:
        return {
            "token": message.recipient.device_token,
            "notification": {"title": message.subject, "body": message.body},
            "data": message.data,
        }
