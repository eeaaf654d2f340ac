"""Ports to the collaborators of the invitation core.

Interfaces are defined in the domain layer (dependency inversion).
Implementations live in the adapter layer.
"""

from access.domain.port.frontend import (
    FlashMessenger,
    LocalizationProvider,
    NavigationTarget,
)
from access.domain.port.role_source import RoleSource
from access.domain.port.submitter import InvitationSubmitter

__all__ = [
    "FlashMessenger",
    "InvitationSubmitter",
    "LocalizationProvider",
    "NavigationTarget",
    "RoleSource",
]
