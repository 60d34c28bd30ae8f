from security_service.config import Settings
from security_service.messaging.base import MessagingService, MessagingType
from security_service.messaging.console import ConsoleMessagingService
from security_service.messaging.email_provider import EmailMessagingService
from security_service.messaging.push import PushNotificationMessagingService
from security_service.messaging.sms import SmsMessagingService
from security_service.messaging.whatsapp import WhatsAppMessagingService


class MessagingServiceProvider:
    """Resolves the messaging service for a channel."""

    def __init__(self, services: dict[MessagingType, MessagingService], console_only: bool = False):
        self._services = services
        self._console = ConsoleMessagingService()
        self._console_only = console_only

    def get(self, type: MessagingType) -> MessagingService:
        if self._console_only:
            return self._console
        return self._services.get(type, self._console)


def create_provider(settings: Settings) -> MessagingServiceProvider:
    timeout = settings.gateway_timeout_seconds
    services: dict[MessagingType, MessagingService] = {
        MessagingType.SMS: SmsMessagingService(settings.sms_gateway_url, settings.gateway_api_key, timeout),
        MessagingType.WHATSAPP: WhatsAppMessagingService(settings.whatsapp_gateway_url, settings.gateway_api_key, timeout),
        MessagingType.PUSH_NOTIFICATION: PushNotificationMessagingService(
            settings.push_gateway_url, settings.gateway_api_key, timeout
        ),
        MessagingType.EMAIL: EmailMessagingService(
            settings.smtp_host,
            settings.smtp_port,
            settings.smtp_user,
            settings.smtp_password,
            settings.smtp_from_email,
        ),
    }
    return MessagingServiceProvider(services, console_only=settings.messaging_provider == "console")
