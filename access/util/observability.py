"""Logfire configuration.

The form opens spans around its transitions and the access API client
around its requests, e.g.::

    with logfire.span("invitation_form.submit", invite_count=2):
        ...
"""

import logfire

from access.config import ObservabilitySettings, Settings

SERVICE_NAME = "access-invitations"
SERVICE_VERSION = "0.1.0"


def sends_to_logfire(observability: ObservabilitySettings) -> bool:
    """Whether telemetry leaves the process.

    An explicit ``send_to_logfire`` wins; otherwise telemetry is sent
    whenever a token is configured.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire for the invitation core.

    Set ``OBSERVABILITY__LOGFIRE_TOKEN`` to ship telemetry; without a token
    spans and logs only go to the console. The console is silent in the
    test environment.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send = sends_to_logfire(observability)

    console: logfire.ConsoleOptions | bool = False
    if settings.environment != "test":
        console = logfire.ConsoleOptions(
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        )

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=observability.logfire_token,
        console=console,
    )

    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_httpx() -> None:
    """Trace every access API request, including latency and status."""
    logfire.instrument_httpx()
