"""Chat message models, outbound client and the inbound bridge."""

from .bridge import NotificationBridge
from .client import ChatClient
from .console import ConsoleTransport
from .models import ChatMessage, ChatUser, Destination
from .protocols import ChatTransport

__all__ = [
    "ChatClient",
    "ChatMessage",
    "ChatTransport",
    "ChatUser",
    "ConsoleTransport",
    "Destination",
    "NotificationBridge",
]
