"""Domain model entities for access invitations."""

from access.domain.model.catalog import Application, RawRole, RoleGrouping
from access.domain.model.invitation import (
    FieldErrors,
    InvitationDraft,
    InvitationRequest,
)
from access.domain.model.role import Role
from access.domain.model.user import User, UserRole

__all__ = [
    "Application",
    "RawRole",
    "RoleGrouping",
    "Role",
    "User",
    "UserRole",
    "InvitationDraft",
    "InvitationRequest",
    "FieldErrors",
]
