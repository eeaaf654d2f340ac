"""Frontend-side adapters."""

from .locale import MESSAGES, MessageCatalog
from .navigation import InMemoryFlashMessenger, InMemoryNavigator

__all__ = [
    "InMemoryFlashMessenger",
    "InMemoryNavigator",
    "MESSAGES",
    "MessageCatalog",
]
