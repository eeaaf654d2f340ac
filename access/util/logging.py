"""Standard library logging setup.

The invitation core itself logs through logfire. Libraries underneath it
(httpx, dishka) use the standard library, so their records are routed to
stdout and, once logfire is configured, forwarded to it as well.
"""

import logging
import sys

import logfire

from access.config import Settings

# Libraries that log every request at INFO
QUIET_LOGGERS = ("httpx", "httpcore")

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def log_level(settings: Settings) -> int:
    """Root log level for the configured environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings, forward_to_logfire: bool = False) -> None:
    """Configure the root logger.

    Args:
        settings: Application settings
        forward_to_logfire: Also hand records to logfire; only useful after
            ``configure_logfire`` ran
    """
    level = log_level(settings)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if forward_to_logfire:
        handlers.append(logfire.LogfireLoggingHandler())

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("access").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
