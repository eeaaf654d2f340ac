"""Interfaces to the presentation side of the form.

Navigation, flash messages and string lookup are owned by the frontend;
the core only calls them.
"""

from abc import ABC, abstractmethod


class NavigationTarget(ABC):
    """Capability to move the user elsewhere."""

    @abstractmethod
    def go_to(self, path: str) -> None:
        """Navigate to an absolute application path."""
        pass

    @abstractmethod
    def go_back(self) -> None:
        """Navigate one step back in the history."""
        pass


class LocalizationProvider(ABC):
    """Pure lookup of localized strings."""

    @abstractmethod
    def translate(self, key: str, **args: object) -> str:
        """Return the string for ``key`` with ``args`` interpolated."""
        pass


class FlashMessenger(ABC):
    """Shows a transient confirmation message."""

    @abstractmethod
    def flash(self, message: str) -> None:
        pass
