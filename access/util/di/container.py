"""Production container."""

from dishka import AsyncContainer, make_async_container

from access.config import Settings
from access.util.di import PROVIDERS, get_provider


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build the container with every production provider.

    Args:
        settings: Settings to inject, loaded from the environment when
            omitted

    Returns:
        Configured container
    """
    providers = [get_provider(base)() for base in PROVIDERS]
    return make_async_container(*providers, context={Settings: settings or Settings()})
