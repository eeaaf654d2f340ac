"""Raw role shapes as delivered by the access API.

A role reaches the invitation form either bare, from the catalog of the
applications the user manages, or wrapped inside one of the user's own
grants. Both shapes are parsed here and flattened by ``RoleCatalog``.
"""

from typing import Any

from pydantic import Field

from access.domain.model.common import DomainModel
from access.domain.value import RoleId

# Application metadata keeps the localized keys of the service registry,
# e.g. "name:en", "OrganizationName:nl" and "logo".
Application = dict[str, Any]


class RawRole(DomainModel):
    """Role exactly as the API returns it."""

    id: RoleId
    name: str
    description: str | None = None
    default_expiry_days: int | None = Field(default=None, alias="defaultExpiryDays")
    enforce_email_equality: bool = Field(default=False, alias="enforceEmailEquality")
    edu_id_only: bool = Field(default=False, alias="eduIDOnly")
    override_settings_allowed: bool = Field(
        default=False, alias="overrideSettingsAllowed"
    )
    application_maps: list[Application] = Field(
        default_factory=list, alias="applicationMaps"
    )


class RoleGrouping(DomainModel):
    """A catalog role together with the applications it grants access to."""

    role: RawRole
    applications: list[Application] = Field(default_factory=list)
