"""Unit tests for SubmissionAssembler."""

from datetime import datetime, timedelta

import pydantic
import pytest

from access.domain.error import ValidationError
from access.domain.model import InvitationDraft, InvitationRequest
from access.domain.service import InvitationDraftState
from access.domain.value import Authority, RoleId, RouteKind, RouteTarget
from tests.factories import NOW, make_role, make_user


def make_draft(**fields) -> InvitationDraft:
    fields.setdefault("expiry_date", NOW + timedelta(days=30))
    fields.setdefault("role_expiry_date", NOW + timedelta(days=366))
    return InvitationDraft(**fields)


class TestBuild:
    """Tests for build method."""

    def test_builds_request(self, submission_assembler):
        draft = make_draft(
            invites=frozenset({"b@x", "a@x"}),
            selected_roles=(make_role(2), make_role(1)),
            intended_authority=Authority.INVITER,
            enforce_email_equality=True,
            message="Hello",
        )

        request = submission_assembler.build(draft)

        assert request.invites == ["a@x", "b@x"]
        assert request.role_identifiers == [2, 1]
        assert request.intended_authority == Authority.INVITER
        assert request.expiry_date == NOW + timedelta(days=30)
        assert request.enforce_email_equality is True
        assert request.message == "Hello"

    def test_payload_uses_wire_names(self, submission_assembler):
        draft = make_draft(
            invites=frozenset({"a@x"}),
            selected_roles=(make_role(1),),
            intended_authority=Authority.GUEST,
            role_expiry_date=None,
            guest_role_included=True,
            edu_id_only=True,
        )

        payload = submission_assembler.build(draft).to_payload()

        assert payload == {
            "invites": ["a@x"],
            "roleIdentifiers": [1],
            "intendedAuthority": "GUEST",
            "expiryDate": "2026-03-31T12:00:00Z",
            "roleExpiryDate": None,
            "enforceEmailEquality": False,
            "eduIDOnly": True,
            "guestRoleIncluded": True,
            "message": None,
        }

    def test_default_clock_sends_utc_dates(
        self,
        submission_assembler,
        role_catalog,
        authority_resolver,
        invitation_settings,
    ):
        """Dates leave the draft with an offset the API can parse as instants."""
        state = InvitationDraftState(
            user=make_user(Authority.MANAGER),
            roles=[make_role(1, default_expiry_days=10)],
            role_catalog=role_catalog,
            authority_resolver=authority_resolver,
            settings=invitation_settings,
        )
        state.initialize(RoleId(1), is_guest=True)
        state.add_invitees(["a@x"])

        payload = submission_assembler.build(state.draft).to_payload()

        assert payload["expiryDate"].endswith("Z")
        assert payload["roleExpiryDate"].endswith("Z")

    def test_naive_dates_are_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            InvitationRequest(
                invites=["a@x"],
                role_identifiers=[RoleId(1)],
                intended_authority=Authority.GUEST,
                expiry_date=datetime(2026, 3, 31, 12, 0, 0),
            )

    def test_missing_authority_raises(self, submission_assembler):
        draft = make_draft(invites=frozenset({"a@x"}), intended_authority=None)

        with pytest.raises(ValidationError):
            submission_assembler.build(draft)


class TestRouteAfterSuccess:
    """Tests for route_after_success method."""

    def test_original_role_wins(self, submission_assembler):
        draft = make_draft(
            selected_roles=(make_role(2), make_role(3)), original_role_id=RoleId(1)
        )

        route = submission_assembler.route_after_success(draft)

        assert route == RouteTarget.role_invitations(RoleId(1))
        assert route.path == "/roles/1/invitations"

    def test_first_selected_role(self, submission_assembler):
        draft = make_draft(selected_roles=(make_role(2), make_role(3)))

        route = submission_assembler.route_after_success(draft)

        assert route.path == "/roles/2/invitations"

    def test_back_without_roles(self, submission_assembler):
        route = submission_assembler.route_after_success(make_draft())

        assert route.kind == RouteKind.BACK
        assert route == RouteTarget.back()
