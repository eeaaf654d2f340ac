"""Unit tests for the Authority hierarchy."""

from access.domain.value import Authority, QueryHint, RouteKind, RouteTarget, RoleId


class TestAuthorityOrdering:
    """Authorities compare by rank, not by their string value."""

    def test_rank_follows_hierarchy(self):
        """GUEST is lowest and SUPER_USER highest."""
        assert Authority.GUEST.rank == 0
        assert Authority.SUPER_USER.rank == 4
        assert (
            Authority.GUEST
            < Authority.INVITER
            < Authority.MANAGER
            < Authority.INSTITUTION_ADMIN
            < Authority.SUPER_USER
        )

    def test_comparison_ignores_alphabetical_order(self):
        """Text order puts INVITER first, rank puts MANAGER above it."""
        assert "INVITER" < "MANAGER"
        assert Authority.MANAGER > Authority.INVITER
        assert Authority.INSTITUTION_ADMIN > Authority.GUEST
        assert not Authority.GUEST >= Authority.INVITER

    def test_max_uses_rank(self):
        """max() picks the highest ranked authority."""
        assert max([Authority.GUEST, Authority.MANAGER, Authority.INVITER]) is (
            Authority.MANAGER
        )

    def test_descending(self):
        """descending() lists the hierarchy from the top."""
        assert Authority.descending() == [
            Authority.SUPER_USER,
            Authority.INSTITUTION_ADMIN,
            Authority.MANAGER,
            Authority.INVITER,
            Authority.GUEST,
        ]

    def test_role_independent_authorities(self):
        """Only SUPER_USER and INSTITUTION_ADMIN can go without a role."""
        independent = [a for a in Authority if a.is_role_independent]
        assert independent == [Authority.INSTITUTION_ADMIN, Authority.SUPER_USER]

    def test_wire_value(self):
        """The enum value is the name used on the wire."""
        assert Authority("INSTITUTION_ADMIN") is Authority.INSTITUTION_ADMIN
        assert Authority.GUEST == "GUEST"


class TestRouteTarget:
    """Tests for RouteTarget constructors."""

    def test_role_invitations_path(self):
        route = RouteTarget.role_invitations(RoleId(7))
        assert route.kind == RouteKind.PATH
        assert route.path == "/roles/7/invitations"

    def test_back_has_no_path(self):
        route = RouteTarget.back()
        assert route.kind == RouteKind.BACK
        assert route.path is None


class TestQueryHint:
    """Tests for QueryHint."""

    def test_guest_flow_by_default(self):
        assert QueryHint().is_guest is True

    def test_maintainer_flow(self):
        assert QueryHint(role_id=RoleId(1), maintainer=True).is_guest is False
