"""Authority domain service."""

from collections.abc import Sequence

from access.domain.error import NotAuthorizedError
from access.domain.model import Role, User
from access.domain.value import Authority

from .base import Service


class AuthorityResolver(Service):
    """Decides which authorities a user may hand out in an invitation."""

    def highest_authority(self, user: User) -> Authority:
        """Highest authority among the user's own grants.

        Super users and institution admins of an organization hold their
        authority outside of any role grant.

        Args:
            user: The user to inspect

        Returns:
            The user's highest authority, GUEST when the user holds nothing
        """
        if user.super_user:
            return Authority.SUPER_USER
        if user.institution_admin and user.organization_guid:
            return Authority.INSTITUTION_ADMIN
        return max(
            (user_role.authority for user_role in user.user_roles),
            default=Authority.GUEST,
        )

    def is_user_allowed(self, min_authority: Authority, user: User) -> bool:
        """Check whether the user holds at least ``min_authority``."""
        return self.highest_authority(user) >= min_authority

    def require_authority(self, min_authority: Authority, user: User) -> None:
        """Raise unless the user holds at least ``min_authority``.

        Raises:
            NotAuthorizedError: If the user ranks below ``min_authority``
        """
        if not self.is_user_allowed(min_authority, user):
            raise NotAuthorizedError(str(user.id), min_authority)

    def allowed_authorities(
        self, user: User, selected_roles: Sequence[Role]
    ) -> list[Authority]:
        """Authorities the user may grant for the given role selection.

        Domain rules:
        - Only authorities ranked strictly below the user's own are offered
        - SUPER_USER and INSTITUTION_ADMIN do not depend on a role and stay
          offered with or without a selection
        - A selected role the user holds directly caps the role-bound
          authorities below the user's authority on that role; the caps of
          all selected roles intersect, falling back to GUEST when nothing
          is left
        - Users whose own authority is role-independent are not capped

        Args:
            user: The inviting user
            selected_roles: Roles currently selected in the draft

        Returns:
            Allowed authorities, highest first, never empty
        """
        highest = self.highest_authority(user)
        grantable = [
            authority for authority in Authority.descending() if authority < highest
        ]
        role_independent = [a for a in grantable if a.is_role_independent]
        role_bound = [a for a in grantable if not a.is_role_independent]

        if not highest.is_role_independent:
            for role in selected_roles:
                if role.grant_authority is not None:
                    role_bound = [a for a in role_bound if a < role.grant_authority]

        if not role_bound:
            role_bound = [Authority.GUEST]
        return role_independent + role_bound
