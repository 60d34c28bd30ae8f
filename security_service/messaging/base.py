from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum


class MessagingType(str, Enum):
    """Delivery channels an OTP can be sent through."""
    SMS = "SMS"
    PUSH_NOTIFICATION = "PUSH_NOTIFICATION"
    EMAIL = "EMAIL"
    WHATSAPP = "WHATSAPP"


class MessagingError(Exception):
    """Raised by a messaging service that cannot hand a message over."""


@dataclass
class Party:
    phone_number: str | None = None
    email: str | None = None
    device_token: str | None = None


@dataclass
class Message:
    recipient: Party
    subject: str
    body: str
    data: dict[str, str] = field(default_factory=dict)


class MessagingService(ABC):
    """Abstract base class for message delivery channels."""

    @abstractmethod
    def send(self, message: Message) -> bool:
        """Send message to its recipient. Returns True on success."""
        ...

    @property
    @abstractmethod
    def channel(self) -> MessagingType | None:
        """Channel served, None for the console service."""
        ...
