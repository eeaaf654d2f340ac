"""Invitation draft domain service.

Holds the draft being composed and applies every user edit to it. Each
edit produces a candidate draft which is passed through
``recompute_derived`` before it replaces the current one, so the derived
fields follow the same rules whatever the edit was.
"""

from collections.abc import Callable, Iterable, Sequence
from datetime import datetime, timedelta, timezone

import logfire

from access.config import InvitationSettings
from access.domain.error import BusinessRuleViolationError
from access.domain.model import InvitationDraft, Role, User
from access.domain.value import Authority, RoleId

from .authority_resolver import AuthorityResolver
from .base import Service
from .role_catalog import RoleCatalog


def utc_now() -> datetime:
    """Current time in UTC; the access API expects offset-aware instants."""
    return datetime.now(timezone.utc)


def overrides_allowed(roles: Sequence[Role]) -> bool:
    """Whether every role lets the inviter override its settings."""
    return all(role.override_settings_allowed for role in roles)


def default_role_expiry_date(
    roles: Sequence[Role], now: datetime, settings: InvitationSettings
) -> datetime:
    """Grant expiry of a guest invitation for the given roles.

    The shortest ``default_expiry_days`` among the roles wins; roles
    without a default are ignored.
    """
    expiry_days = [
        role.default_expiry_days for role in roles if role.default_expiry_days
    ]
    days = min(expiry_days) if expiry_days else settings.guest_role_expiry_days
    return now + timedelta(days=days)


def recompute_derived(
    previous: InvitationDraft,
    draft: InvitationDraft,
    allowed: Sequence[Authority],
    now: datetime,
    settings: InvitationSettings,
) -> InvitationDraft:
    """Bring the derived fields of ``draft`` in line with its inputs.

    Rules:
    - An authority outside ``allowed`` is replaced by the lowest allowed one
    - Email equality and eduID-only are the OR over the selected roles,
      unless every selected role allows overrides and the selection did
      not change
    - For GUEST invitations the grant expiry is reset to the role default
      whenever the selection, the authority or the custom-expiry toggle
      changed; other authorities keep their grant expiry
    - The guest role can only be included in GUEST invitations

    Args:
        previous: Draft before the edit
        draft: Candidate draft after the edit
        allowed: Authorities allowed for the candidate's selection
        now: Current time
        settings: Invitation defaults

    Returns:
        The draft with its derived fields recomputed
    """
    update: dict[str, object] = {}

    authority = draft.intended_authority
    if authority not in allowed:
        authority = allowed[-1]
        update["intended_authority"] = authority

    selection_changed = previous.role_ids != draft.role_ids
    authority_changed = (
        previous.intended_authority != authority or "intended_authority" in update
    )
    custom_toggled = previous.custom_role_expiry_date != draft.custom_role_expiry_date

    if selection_changed or not overrides_allowed(draft.selected_roles):
        update["enforce_email_equality"] = any(
            role.enforce_email_equality for role in draft.selected_roles
        )
        update["edu_id_only"] = any(role.edu_id_only for role in draft.selected_roles)

    if authority == Authority.GUEST:
        if selection_changed or authority_changed or custom_toggled:
            update["role_expiry_date"] = default_role_expiry_date(
                draft.selected_roles, now, settings
            )
    elif draft.guest_role_included:
        update["guest_role_included"] = False

    return draft.model_copy(update=update) if update else draft


class InvitationDraftState(Service):
    """The mutable side of the invitation form.

    One instance lives per opened form. ``draft`` always satisfies the
    derivation rules of ``recompute_derived``.
    """

    def __init__(
        self,
        user: User,
        roles: Sequence[Role],
        role_catalog: RoleCatalog,
        authority_resolver: AuthorityResolver,
        settings: InvitationSettings,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize draft state with form-open defaults.

        Args:
            user: The inviting user
            roles: Normalized role catalog
            role_catalog: Catalog service, used to resolve the initial role
            authority_resolver: Resolver for the allowed authorities
            settings: Invitation defaults
            clock: Source of the current time
        """
        self.user = user
        self.roles = list(roles)
        self.role_catalog = role_catalog
        self.authority_resolver = authority_resolver
        self.settings = settings
        self.clock = clock
        self.guest = True
        self.draft = self._defaults()

    def initialize(
        self, hint_role_id: RoleId | None, is_guest: bool
    ) -> InvitationDraft:
        """Seed the draft from the navigation hint.

        Args:
            hint_role_id: Role whose management view opened the form
            is_guest: True for the guest flow, False for the maintainer flow

        Returns:
            The initialized draft
        """
        with logfire.span(
            "invitation_draft.initialize",
            hint_role_id=hint_role_id,
            is_guest=is_guest,
        ):
            self.guest = is_guest
            defaults = self._defaults()
            update: dict[str, object] = {
                "intended_authority": Authority.GUEST if is_guest else Authority.INVITER
            }

            now = self.clock()
            role = self.role_catalog.resolve_initial_role(self.roles, hint_role_id)
            selected: tuple[Role, ...] = ()
            if role is not None:
                selected = (role,)
                update["selected_roles"] = selected
                if role.id == hint_role_id:
                    update.update(
                        enforce_email_equality=role.enforce_email_equality,
                        edu_id_only=role.edu_id_only,
                        role_expiry_date=default_role_expiry_date(
                            [role], now, self.settings
                        ),
                        original_role_id=role.id,
                    )
            if is_guest and "role_expiry_date" not in update:
                update["role_expiry_date"] = default_role_expiry_date(
                    selected, now, self.settings
                )

            self._commit(defaults.model_copy(update=update), previous=defaults)
            logfire.info(
                "Invitation draft initialized",
                user_id=str(self.user.id),
                role_ids=self.draft.role_ids,
                intended_authority=self.draft.intended_authority,
            )
            return self.draft

    def set_roles(self, selection: Sequence[Role] | Role | None) -> InvitationDraft:
        """Replace the role selection.

        ``None`` clears the selection. Duplicate roles are dropped,
        keeping the first occurrence.
        """
        if selection is None:
            roles: tuple[Role, ...] = ()
        elif isinstance(selection, Role):
            roles = (selection,)
        else:
            unique: dict[RoleId, Role] = {}
            for role in selection:
                unique.setdefault(role.id, role)
            roles = tuple(unique.values())
        return self._commit(self.draft.model_copy(update={"selected_roles": roles}))

    def set_authority(self, authority: Authority) -> InvitationDraft:
        """Change the intended authority.

        Raises:
            BusinessRuleViolationError: If the authority is not allowed for
                the current selection
        """
        allowed = self.allowed_authorities()
        if authority not in allowed:
            logfire.warn(
                "Authority not allowed",
                user_id=str(self.user.id),
                authority=authority,
                allowed=allowed,
            )
            raise BusinessRuleViolationError(
                f"Authority {authority.value} is not allowed, choose one of "
                f"{', '.join(a.value for a in allowed)}"
            )
        return self._commit(
            self.draft.model_copy(update={"intended_authority": authority})
        )

    def add_invitees(self, addresses: Iterable[str]) -> InvitationDraft:
        invites = self.draft.invites | frozenset(addresses)
        return self._commit(self.draft.model_copy(update={"invites": invites}))

    def remove_invitee(self, address: str) -> InvitationDraft:
        invites = self.draft.invites - {address}
        return self._commit(self.draft.model_copy(update={"invites": invites}))

    def set_message(self, message: str | None) -> InvitationDraft:
        return self._commit(
            self.draft.model_copy(update={"message": message or None})
        )

    def toggle_advanced_settings(self) -> InvitationDraft:
        advanced = not self.draft.display_advanced_settings
        return self._commit(
            self.draft.model_copy(update={"display_advanced_settings": advanced})
        )

    def toggle_custom_expiry_date(self) -> InvitationDraft:
        """Flip the custom link expiry toggle and reset the link expiry."""
        return self._commit(
            self.draft.model_copy(
                update={
                    "custom_expiry_date": not self.draft.custom_expiry_date,
                    "expiry_date": self._default_expiry_date(),
                }
            )
        )

    def toggle_custom_role_expiry_date(self) -> InvitationDraft:
        """Flip the custom grant expiry toggle.

        Guest invitations get their grant expiry reset to the role default.
        """
        custom = not self.draft.custom_role_expiry_date
        return self._commit(
            self.draft.model_copy(update={"custom_role_expiry_date": custom})
        )

    def set_guest_role_included(self, included: bool) -> InvitationDraft:
        if self.draft.intended_authority != Authority.GUEST:
            raise BusinessRuleViolationError(
                "The guest role can only be included in guest invitations"
            )
        return self._commit(
            self.draft.model_copy(update={"guest_role_included": included})
        )

    def set_enforce_email_equality(self, enforce: bool) -> InvitationDraft:
        self._require_override("enforce email equality")
        return self._commit(
            self.draft.model_copy(update={"enforce_email_equality": enforce})
        )

    def set_edu_id_only(self, edu_id_only: bool) -> InvitationDraft:
        self._require_override("eduID only")
        return self._commit(self.draft.model_copy(update={"edu_id_only": edu_id_only}))

    def set_expiry_date(self, expiry_date: datetime) -> InvitationDraft:
        """Set a custom expiry date of the invitation link.

        Raises:
            BusinessRuleViolationError: If the custom toggle is off or the
                date lies outside tomorrow up to the maximum expiry
        """
        if not self.draft.custom_expiry_date:
            raise BusinessRuleViolationError("Custom expiry date is not enabled")
        if not self.settings.past_date_allowed:
            today = self.clock().date()
            earliest = today + timedelta(days=1)
            latest = today + timedelta(days=self.settings.max_expiry_days)
            if not earliest <= expiry_date.date() <= latest:
                raise BusinessRuleViolationError(
                    f"Expiry date must be between {earliest} and {latest}"
                )
        return self._commit(self.draft.model_copy(update={"expiry_date": expiry_date}))

    def set_role_expiry_date(
        self, role_expiry_date: datetime | None
    ) -> InvitationDraft:
        """Set a custom grant expiry date, None meaning the grant never expires.

        Raises:
            BusinessRuleViolationError: If overrides are not allowed, the
                custom toggle is off, a guest grant would never expire or the
                date is not after the link expiry
        """
        self._require_override("role expiry date")
        if not self.draft.custom_role_expiry_date:
            raise BusinessRuleViolationError("Custom role expiry date is not enabled")
        if role_expiry_date is None:
            if self.draft.intended_authority == Authority.GUEST:
                raise BusinessRuleViolationError("Guest roles must expire")
        elif not self.settings.past_date_allowed:
            earliest = self.draft.expiry_date.date() + timedelta(days=1)
            if role_expiry_date.date() < earliest:
                raise BusinessRuleViolationError(
                    f"Role expiry date must be on or after {earliest}"
                )
        return self._commit(
            self.draft.model_copy(update={"role_expiry_date": role_expiry_date})
        )

    def allowed_authorities(self) -> list[Authority]:
        return self.authority_resolver.allowed_authorities(
            self.user, self.draft.selected_roles
        )

    @property
    def override_allowed(self) -> bool:
        return overrides_allowed(self.draft.selected_roles)

    def available_roles(self) -> list[Role]:
        """Catalog roles that are not selected yet."""
        selected = set(self.draft.role_ids)
        return [role for role in self.roles if role.id not in selected]

    def _require_override(self, setting: str) -> None:
        if not self.override_allowed:
            raise BusinessRuleViolationError(
                f"Selected roles do not allow overriding {setting}"
            )

    def _commit(
        self, candidate: InvitationDraft, previous: InvitationDraft | None = None
    ) -> InvitationDraft:
        allowed = self.authority_resolver.allowed_authorities(
            self.user, candidate.selected_roles
        )
        self.draft = recompute_derived(
            previous or self.draft, candidate, allowed, self.clock(), self.settings
        )
        return self.draft

    def _default_expiry_date(self) -> datetime:
        return self.clock() + timedelta(days=self.settings.default_expiry_days)

    def _defaults(self) -> InvitationDraft:
        now = self.clock()
        return InvitationDraft(
            expiry_date=now + timedelta(days=self.settings.default_expiry_days),
            role_expiry_date=now
            + timedelta(days=self.settings.default_role_expiry_days),
            intended_authority=Authority.GUEST,
        )
