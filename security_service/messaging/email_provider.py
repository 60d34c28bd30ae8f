"""Email delivery via SMTP. Logs the message instead when SMTP is not configured."""
import logging
import smtplib
from email.mime.text import MIMEText

from security_service.messaging.base import Message, MessagingService, MessagingType

logger = logging.getLogger("security-service")

SMTP_TIMEOUT_SECONDS = 15


class EmailMessagingService(MessagingService):

    def __init__(
        self,
        host: str,
        port: int = 587,
        user: str = "",
        password: str = "",
        from_email: str = "",
    ):
        self._host = host
        self._port = port
        self._user = user
        self._password = password
        self._from_email = from_email

    @property
    def channel(self) -> MessagingType:
        return MessagingType.EMAIL

    def send(self, message: Message) -> bool:
        to_email = message.recipient.email
        if not self._host:
            logger.warning("SMTP not configured, falling back to console log")
            logger.info("Email for %s: %s", to_email, message.body)
            return True

        msg = MIMEText(message.body, "plain")
        msg["Subject"] = message.subject
        msg["From"] = self._from_email
        msg["To"] = to_email

        try:
            with smtplib.SMTP(self._host, self._port, timeout=SMTP_TIMEOUT_SECONDS) as server:
                server.starttls()
                if self._user:
                    server.login(self._user, self._password)
                server.sendmail(self._from_email, [to_email], msg.as_string())
        except (smtplib.SMTPException, OSError) as e:
            logger.error("Failed to send email to %s: %s", to_email, e)
            return False

        logger.info("Email sent to %s", to_email)
        return True
