import logging
from abc import abstractmethod

import httpx

from security_service.messaging.base import Message, MessagingService, MessagingType

logger = logging.getLogger("security-service")


class GatewayMessagingService(MessagingService):
    """
    Delivers messages by POSTing JSON to an HTTP gateway.
    Without a gateway URL the message is only logged.
    """

    def __init__(
        self,
        url: str,
        api_key: str = "",
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ):
        self._url = url
        self._api_key = api_key
        self._client = client or httpx.Client(timeout=timeout)

    @property
    @abstractmethod
    def channel(self) -> MessagingType:
        ...

    @abstractmethod
    def payload(self, message: Message) -> dict:
        """Gateway request body for message."""
        ...

    def send(self, message: Message) -> bool:
        name = self.channel.value
        if not self._url:
            logger.warning("%s gateway not configured, falling back to console log", name)
            logger.info("%s message: %s", name, message.body)
            return True

        headers = {"Authorization": f"Bearer {self._api_key}"} if self._api_key else {}
        try:
            resp = self._client.post(self._url, json=self.payload(message), headers=headers)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("%s gateway rejected message: %s", name, e)
            return False

        logger.info("%s message delivered to gateway", name)
        return True
