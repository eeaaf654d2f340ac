"""Domain value objects for access invitations."""

from access.domain.value.identifiers import RoleId, UserId
from access.domain.value.types import (
    Authority,
    FormStatus,
    QueryHint,
    RouteKind,
    RouteTarget,
)

__all__ = [
    # Identifiers
    "RoleId",
    "UserId",
    # Types
    "Authority",
    "FormStatus",
    "QueryHint",
    "RouteKind",
    "RouteTarget",
]
