"""Runtime bootstrap for embedding the invitation core."""

from dishka import AsyncContainer

from access.config import Settings
from access.util.di.container import create_container
from access.util.logging import setup_logging
from access.util.observability import configure_logfire, instrument_httpx


def bootstrap(settings: Settings | None = None) -> AsyncContainer:
    """Configure logfire and logging, then build the container.

    Logfire is configured first so that standard library records can be
    forwarded to it and httpx can be instrumented.

    Args:
        settings: Settings to configure with, loaded from the environment
            when omitted

    Returns:
        Production DI container
    """
    settings = settings or Settings()
    configure_logfire(settings)
    setup_logging(settings, forward_to_logfire=True)
    instrument_httpx()
    return create_container(settings)
