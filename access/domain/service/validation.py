"""Validation domain service."""

from access.domain.model import FieldErrors, InvitationDraft
from access.domain.value import Authority

from .base import Service


class ValidationEngine(Service):
    """Decides whether a draft can be submitted.

    Validation problems are returned as data, never raised.
    """

    def is_valid(self, draft: InvitationDraft) -> bool:
        """Check whether the draft is complete enough to submit.

        Args:
            draft: Draft to check

        Returns:
            True when an authority is set, at least one invitee is present
            and either a role is selected or the authority does not need one
        """
        return (
            draft.intended_authority is not None
            and bool(draft.invites)
            and not self._role_required(draft)
        )

    def field_errors(
        self, draft: InvitationDraft, has_attempted_submit: bool
    ) -> FieldErrors:
        """Per-field errors of the draft.

        Args:
            draft: Draft to check
            has_attempted_submit: Whether the user already tried to submit

        Returns:
            Field errors; callers show them only after a submit attempt
        """
        return FieldErrors(
            valid=self.is_valid(draft),
            role_required=self._role_required(draft),
            invitees_required=not draft.invites,
            has_attempted_submit=has_attempted_submit,
        )

    @staticmethod
    def _role_required(draft: InvitationDraft) -> bool:
        if draft.selected_roles:
            return False
        authority = draft.intended_authority
        return authority is None or not authority.is_role_independent
