"""Domain value objects for access invitations.

Value objects are immutable and defined by their values, not identity.
They encapsulate ordering rules and small pieces of business logic.
"""

from enum import Enum

from access.domain.value.common import ValueObject
from access.domain.value.identifiers import RoleId


class Authority(str, Enum):
    """Authority a user holds on a role, or may grant to an invitee.

    Members are declared lowest first. Comparisons use the rank, never the
    string value, so ``Authority.MANAGER > Authority.INVITER`` holds.
    """

    GUEST = "GUEST"
    INVITER = "INVITER"
    MANAGER = "MANAGER"
    INSTITUTION_ADMIN = "INSTITUTION_ADMIN"
    SUPER_USER = "SUPER_USER"

    @property
    def rank(self) -> int:
        """Position in the hierarchy, GUEST being 0."""
        return list(type(self)).index(self)

    @property
    def is_role_independent(self) -> bool:
        """Whether the authority can be granted without selecting a role."""
        return self in (Authority.INSTITUTION_ADMIN, Authority.SUPER_USER)

    @classmethod
    def descending(cls) -> list["Authority"]:
        """All authorities, highest first."""
        return sorted(cls, key=lambda authority: authority.rank, reverse=True)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Authority):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Authority):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Authority):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Authority):
            return NotImplemented
        return self.rank >= other.rank


class FormStatus(str, Enum):
    """Lifecycle state of the invitation form."""

    LOADING = "loading"
    READY = "ready"
    SUBMITTING = "submitting"
    SUCCESS = "success"


class RouteKind(str, Enum):
    """Kind of navigation performed after a successful submission."""

    PATH = "path"
    BACK = "back"


class RouteTarget(ValueObject):
    """Where the user is sent once the invitation has been created."""

    kind: RouteKind
    path: str | None = None

    @classmethod
    def role_invitations(cls, role_id: RoleId) -> "RouteTarget":
        """Route to the invitation overview of a role."""
        return cls(kind=RouteKind.PATH, path=f"/roles/{role_id}/invitations")

    @classmethod
    def back(cls) -> "RouteTarget":
        """Route one step back in the navigation history."""
        return cls(kind=RouteKind.BACK)


class QueryHint(ValueObject):
    """Navigation hint read once when the form opens.

    ``role_id`` names the role whose management view opened the form and
    ``maintainer`` distinguishes the colleague flow from the guest flow.
    """

    role_id: RoleId | None = None
    maintainer: bool = False

    @property
    def is_guest(self) -> bool:
        """Guest flow unless the maintainer flag was passed."""
        return not self.maintainer
