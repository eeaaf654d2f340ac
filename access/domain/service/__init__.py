"""Domain services."""

from .authority_resolver import AuthorityResolver
from .base import Service
from .draft_state import (
    InvitationDraftState,
    default_role_expiry_date,
    overrides_allowed,
    recompute_derived,
    utc_now,
)
from .role_catalog import MULTIPLE_ROLES_ICON, RoleCatalog
from .submission import SubmissionAssembler
from .validation import ValidationEngine

__all__ = [
    "AuthorityResolver",
    "InvitationDraftState",
    "MULTIPLE_ROLES_ICON",
    "RoleCatalog",
    "Service",
    "SubmissionAssembler",
    "ValidationEngine",
    "default_role_expiry_date",
    "overrides_allowed",
    "recompute_derived",
    "utc_now",
]
