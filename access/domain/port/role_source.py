"""Role source interface."""

from abc import ABC, abstractmethod

from access.domain.model import RoleGrouping, User


class RoleSource(ABC):
    """Remote read of the roles a user may hand out.

    Implementations live in the adapter layer.
    """

    @abstractmethod
    async def fetch_roles_for_applications(self, user: User) -> list[RoleGrouping]:
        """Fetch the catalog roles of the applications the user manages.

        Args:
            user: The user opening the invitation form

        Returns:
            Roles paired with their applications

        Raises:
            CatalogLoadError: If the catalog could not be fetched
        """
        pass
