"""Access API infrastructure providers."""

from dishka import Scope, provide

from access.adapter.api import AccessAPIClient, HttpAccessClient
from access.config import Settings
from access.domain.port import InvitationSubmitter, RoleSource
from access.util.error import ConfigurationError
from access.util.di.base import ProviderBase


class AccessAPIProvider(ProviderBase):
    """Access API component base."""

    __mock_component__ = "access_api"


class ProdAccessAPIProvider(AccessAPIProvider):
    """Production access API provider over HTTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_access_api_client(self, settings: Settings) -> AccessAPIClient:
        """Provide access API client.

        Raises:
            ConfigurationError: If the access API base URL is not configured
        """
        if not settings.access_api.base_url:
            raise ConfigurationError("Access API base URL must be configured")

        return HttpAccessClient(
            base_url=settings.access_api.base_url,
            timeout=settings.access_api.timeout,
        )

    @provide(scope=Scope.APP)
    def get_role_source(self, client: AccessAPIClient) -> RoleSource:
        """Provide role source."""
        return client

    @provide(scope=Scope.APP)
    def get_invitation_submitter(self, client: AccessAPIClient) -> InvitationSubmitter:
        """Provide invitation submitter."""
        return client
