"""Submission domain service."""

from access.domain.error import ValidationError
from access.domain.model import InvitationDraft, InvitationRequest
from access.domain.value import RouteTarget

from .base import Service


class SubmissionAssembler(Service):
    """Turns a draft into the outbound request and picks the next route."""

    def build(self, draft: InvitationDraft) -> InvitationRequest:
        """Assemble the invitation request.

        Args:
            draft: A valid draft

        Returns:
            Request with the role identifiers in selection order

        Raises:
            ValidationError: If the draft has no intended authority
        """
        if draft.intended_authority is None:
            raise ValidationError("Intended authority is required")
        return InvitationRequest(
            invites=sorted(draft.invites),
            role_identifiers=draft.role_ids,
            intended_authority=draft.intended_authority,
            expiry_date=draft.expiry_date,
            role_expiry_date=draft.role_expiry_date,
            enforce_email_equality=draft.enforce_email_equality,
            edu_id_only=draft.edu_id_only,
            guest_role_included=draft.guest_role_included,
            message=draft.message,
        )

    def route_after_success(self, draft: InvitationDraft) -> RouteTarget:
        """Where to go once the invitation was created.

        The role that opened the form wins over the first selected role;
        without either the user goes back one step.
        """
        if draft.original_role_id is not None:
            return RouteTarget.role_invitations(draft.original_role_id)
        if draft.role_ids:
            return RouteTarget.role_invitations(draft.role_ids[0])
        return RouteTarget.back()
