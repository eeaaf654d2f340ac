"""User aggregate root.

The user on whose behalf the invitation form runs. Passed explicitly into
every operation that needs it.
"""

from pydantic import Field

from access.domain.model.catalog import Application, RawRole
from access.domain.model.common import DomainModel
from access.domain.value import Authority, UserId


class UserRole(DomainModel):
    """An existing grant: the user holds ``authority`` on ``role``."""

    authority: Authority
    role: RawRole
    applications: list[Application] = Field(default_factory=list)


class User(DomainModel):
    """Authenticated user composing an invitation."""

    id: UserId
    name: str | None = None
    email: str | None = None
    super_user: bool = Field(default=False, alias="superUser")
    institution_admin: bool = Field(default=False, alias="institutionAdmin")
    organization_guid: str | None = Field(default=None, alias="organizationGUID")
    user_roles: list[UserRole] = Field(default_factory=list, alias="userRoles")
