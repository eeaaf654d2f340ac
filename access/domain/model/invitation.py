"""Invitation draft and outbound request.

The draft is immutable; ``InvitationDraftState`` replaces it with an
updated copy on every mutation.
"""

from datetime import datetime

from pydantic import AwareDatetime, Field, model_validator

from access.domain.model.common import DomainModel
from access.domain.model.role import Role
from access.domain.value import Authority, RoleId


class InvitationDraft(DomainModel):
    """In-progress invitation composed by the inviter.

    Business rules:
    - Invitees and selected roles never contain duplicates
    - ``role_expiry_date`` of None means the grant never expires
    - ``original_role_id`` is set when the form was opened from a role
    """

    invites: frozenset[str] = frozenset()
    selected_roles: tuple[Role, ...] = ()
    intended_authority: Authority | None = Authority.GUEST
    expiry_date: datetime
    role_expiry_date: datetime | None
    enforce_email_equality: bool = False
    edu_id_only: bool = False
    guest_role_included: bool = False
    message: str | None = None
    custom_expiry_date: bool = False
    custom_role_expiry_date: bool = False
    display_advanced_settings: bool = False
    original_role_id: RoleId | None = None

    @model_validator(mode="after")
    def unique_selected_roles(self) -> "InvitationDraft":
        """Reject a selection that names the same role twice."""
        if len(self.role_ids) != len(set(self.role_ids)):
            raise ValueError("Selected roles must be unique")
        return self

    @property
    def role_ids(self) -> list[RoleId]:
        """Identifiers of the selected roles, in selection order."""
        return [role.id for role in self.selected_roles]


class InvitationRequest(DomainModel):
    """Request sent to the invitation endpoint."""

    invites: list[str]
    role_identifiers: list[RoleId] = Field(alias="roleIdentifiers")
    intended_authority: Authority = Field(alias="intendedAuthority")
    expiry_date: AwareDatetime | None = Field(default=None, alias="expiryDate")
    role_expiry_date: AwareDatetime | None = Field(
        default=None, alias="roleExpiryDate"
    )
    enforce_email_equality: bool = Field(default=False, alias="enforceEmailEquality")
    edu_id_only: bool = Field(default=False, alias="eduIDOnly")
    guest_role_included: bool = Field(default=False, alias="guestRoleIncluded")
    message: str | None = None

    def to_payload(self) -> dict:
        """Serialize to the JSON body expected by the API."""
        return self.model_dump(mode="json", by_alias=True)


class FieldErrors(DomainModel):
    """Per-field validation result of a draft.

    Errors are computed continuously; the ``visible_*`` properties only
    report them after a first submission attempt.
    """

    valid: bool
    role_required: bool
    invitees_required: bool
    has_attempted_submit: bool = False

    @property
    def visible_role_required(self) -> bool:
        return self.has_attempted_submit and self.role_required

    @property
    def visible_invitees_required(self) -> bool:
        return self.has_attempted_submit and self.invitees_required

    @property
    def submit_disabled(self) -> bool:
        """Submit is disabled once an attempt failed and nothing was fixed."""
        return self.has_attempted_submit and not self.valid
