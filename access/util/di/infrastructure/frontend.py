"""Frontend infrastructure providers."""

from dishka import Scope, provide

from access.adapter.frontend import (
    InMemoryFlashMessenger,
    InMemoryNavigator,
    MessageCatalog,
)
from access.domain.port import FlashMessenger, LocalizationProvider, NavigationTarget
from access.util.di.base import ProviderBase


class FrontendProvider(ProviderBase):
    """Navigation, flash and localization provider - concrete, no mocks needed.

    Navigation and flash recorders are REQUEST-scoped so every form sees
    only its own history.
    """

    @provide(scope=Scope.APP)
    def get_localization(self) -> LocalizationProvider:
        """Provide English message catalog."""
        return MessageCatalog()

    @provide(scope=Scope.REQUEST)
    def get_navigation(self) -> NavigationTarget:
        """Provide navigation recorder."""
        return InMemoryNavigator()

    @provide(scope=Scope.REQUEST)
    def get_flash(self) -> FlashMessenger:
        """Provide flash message recorder."""
        return InMemoryFlashMessenger()
