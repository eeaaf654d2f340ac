"""Role entity.

The flat shape every downstream component works with, regardless of
whether the role came from the catalog or from one of the user's grants.
"""

from access.domain.model.common import DomainModel
from access.domain.value import Authority, RoleId


class Role(DomainModel):
    """Grantable role bound to one or more applications.

    Business rules:
    - ``default_expiry_days`` drives the grant expiry of guest invitations
    - ``override_settings_allowed`` lets the inviter change the email,
      eduID and expiry policy instead of inheriting it
    - ``grant_authority`` is the current user's own authority on the role,
      None when the user does not hold the role directly
    """

    id: RoleId
    name: str
    description: str | None = None
    default_expiry_days: int | None = None
    enforce_email_equality: bool = False
    edu_id_only: bool = False
    override_settings_allowed: bool = False
    application_name: str | None = None
    application_organization_name: str | None = None
    logo: str | None = None
    grant_authority: Authority | None = None
