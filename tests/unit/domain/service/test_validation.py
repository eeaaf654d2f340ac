"""Unit tests for ValidationEngine."""

from datetime import timedelta

import pytest

from access.domain.model import InvitationDraft
from access.domain.value import Authority
from tests.factories import NOW, make_role


def make_draft(**fields) -> InvitationDraft:
    fields.setdefault("expiry_date", NOW + timedelta(days=30))
    fields.setdefault("role_expiry_date", NOW + timedelta(days=366))
    return InvitationDraft(**fields)


class TestIsValid:
    """Tests for is_valid method."""

    @pytest.mark.parametrize("authority", list(Authority))
    def test_no_invitees_is_invalid(self, validation_engine, authority):
        draft = make_draft(selected_roles=(make_role(1),), intended_authority=authority)
        assert validation_engine.is_valid(draft) is False

    @pytest.mark.parametrize(
        "authority", [Authority.SUPER_USER, Authority.INSTITUTION_ADMIN]
    )
    def test_role_independent_authority_needs_no_role(
        self, validation_engine, authority
    ):
        draft = make_draft(invites=frozenset({"a@x"}), intended_authority=authority)
        assert validation_engine.is_valid(draft) is True

    @pytest.mark.parametrize(
        "authority", [Authority.GUEST, Authority.INVITER, Authority.MANAGER]
    )
    def test_role_bound_authority_needs_role(self, validation_engine, authority):
        draft = make_draft(invites=frozenset({"a@x"}), intended_authority=authority)
        assert validation_engine.is_valid(draft) is False

    def test_complete_draft(self, validation_engine):
        draft = make_draft(
            invites=frozenset({"a@x"}),
            selected_roles=(make_role(1),),
            intended_authority=Authority.GUEST,
        )
        assert validation_engine.is_valid(draft) is True

    def test_missing_authority(self, validation_engine):
        draft = make_draft(
            invites=frozenset({"a@x"}),
            selected_roles=(make_role(1),),
            intended_authority=None,
        )
        assert validation_engine.is_valid(draft) is False


class TestFieldErrors:
    """Tests for field_errors method."""

    def test_errors_hidden_before_attempt(self, validation_engine):
        errors = validation_engine.field_errors(
            make_draft(), has_attempted_submit=False
        )

        assert errors.valid is False
        assert errors.role_required is True
        assert errors.invitees_required is True
        assert errors.visible_role_required is False
        assert errors.visible_invitees_required is False
        assert errors.submit_disabled is False

    def test_errors_shown_after_attempt(self, validation_engine):
        errors = validation_engine.field_errors(make_draft(), has_attempted_submit=True)

        assert errors.visible_role_required is True
        assert errors.visible_invitees_required is True
        assert errors.submit_disabled is True

    def test_only_missing_invitees(self, validation_engine):
        draft = make_draft(selected_roles=(make_role(1),))

        errors = validation_engine.field_errors(draft, has_attempted_submit=True)

        assert errors.role_required is False
        assert errors.invitees_required is True

    def test_fixed_draft_enables_submit(self, validation_engine):
        draft = make_draft(
            invites=frozenset({"a@x"}), selected_roles=(make_role(1),)
        )

        errors = validation_engine.field_errors(draft, has_attempted_submit=True)

        assert errors.valid is True
        assert errors.submit_disabled is False
