"""Access API client implementations.

The access API serves the role catalog and creates invitations. Both
calls are made from the browser session of the inviting user; timeouts
and retries are left to httpx and the caller.
"""

import httpx
import logfire

from access.adapter.error import CatalogLoadError, SubmissionError
from access.domain.model import InvitationRequest, RoleGrouping, User
from access.domain.port import InvitationSubmitter, RoleSource


class AccessAPIClient(RoleSource, InvitationSubmitter):
    """Base class for access API clients.

    Provides type distinction for dependency injection.
    """

    pass


class HttpAccessClient(AccessAPIClient):
    """Access API client over HTTP."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize HTTP client.

        Args:
            base_url: Base URL of the access API
            timeout: Request timeout in seconds
            transport: Optional httpx transport, e.g. a mock transport in tests
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

        self.roles_url = f"{self.base_url}/api/v1/roles"
        self.invitations_url = f"{self.base_url}/api/v1/invitations"

    async def fetch_roles_for_applications(self, user: User) -> list[RoleGrouping]:
        """Fetch the role catalog.

        Args:
            user: The user the catalog is fetched for

        Returns:
            Roles with their applications

        Raises:
            CatalogLoadError: If the request fails, returns a non-200 or the
                body is not a role catalog
        """
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(self.roles_url, timeout=self.timeout)

                if response.status_code != 200:
                    logfire.error(
                        "Role catalog request failed",
                        user_id=str(user.id),
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise CatalogLoadError(
                        f"Role catalog request failed: {response.status_code}"
                    )

                try:
                    return [
                        RoleGrouping.model_validate(item) for item in response.json()
                    ]
                except (TypeError, ValueError) as e:
                    logfire.error(
                        "Role catalog response malformed",
                        user_id=str(user.id),
                        error=str(e),
                    )
                    raise CatalogLoadError(f"Malformed role catalog: {e}") from e

        except httpx.HTTPError as e:
            logfire.error("Role catalog HTTP error", error=str(e))
            raise CatalogLoadError(f"HTTP error fetching role catalog: {e}")

    async def create(self, request: InvitationRequest) -> None:
        """Post the invitation request.

        Args:
            request: The assembled invitation request

        Raises:
            SubmissionError: If the request fails or returns a non-2xx
        """
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.invitations_url,
                    json=request.to_payload(),
                    timeout=self.timeout,
                )

                if not response.is_success:
                    logfire.error(
                        "Invitation request failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise SubmissionError(
                        f"Invitation request failed: {response.status_code}",
                        status_code=response.status_code,
                    )

                logfire.info(
                    "Invitation request accepted",
                    status_code=response.status_code,
                    invite_count=len(request.invites),
                )

        except httpx.HTTPError as e:
            logfire.error("Invitation HTTP error", error=str(e))
            raise SubmissionError(f"HTTP error creating invitation: {e}")


class InMemoryAccessClient(AccessAPIClient):
    """In-memory access API client for testing.

    Serves a fixed catalog and records every request it receives.
    Set ``catalog_error`` or ``submission_error`` to simulate failures.
    """

    def __init__(self, groupings: list[RoleGrouping] | None = None) -> None:
        self.groupings: list[RoleGrouping] = list(groupings or [])
        self.requests: list[InvitationRequest] = []
        self.catalog_error: CatalogLoadError | None = None
        self.submission_error: SubmissionError | None = None

    async def fetch_roles_for_applications(self, user: User) -> list[RoleGrouping]:
        if self.catalog_error:
            raise self.catalog_error
        return list(self.groupings)

    async def create(self, request: InvitationRequest) -> None:
        self.requests.append(request)
        if self.submission_error:
            raise self.submission_error
