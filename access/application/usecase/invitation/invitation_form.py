"""Invitation form use case."""

from collections.abc import Callable
from datetime import datetime

import logfire
from pydantic import BaseModel

from access.adapter.error import CatalogLoadError
from access.application.usecase.base import BaseUseCase
from access.config import InvitationSettings
from access.domain.error import BusinessRuleViolationError, NotAuthorizedError
from access.domain.model import FieldErrors, InvitationDraft, RoleGrouping, User
from access.domain.port import (
    FlashMessenger,
    InvitationSubmitter,
    LocalizationProvider,
    NavigationTarget,
    RoleSource,
)
from access.domain.service import (
    AuthorityResolver,
    InvitationDraftState,
    RoleCatalog,
    SubmissionAssembler,
    ValidationEngine,
    utc_now,
)
from access.domain.value import Authority, FormStatus, QueryHint, RouteKind, RouteTarget

NOT_FOUND_PATH = "/404"


class OpenInvitationFormRequest(BaseModel):
    """Request to open the invitation form."""

    user: User
    hint: QueryHint = QueryHint()


class AuthorityOption(BaseModel):
    """Selectable authority with its localized label."""

    value: Authority
    label: str


class InvitationFormUseCase(
    BaseUseCase[OpenInvitationFormRequest, InvitationDraft | None]
):
    """Drives one invitation form from opening to submission.

    State machine::

        LOADING -> READY -> SUBMITTING -> SUCCESS
                     ^          |
                     +----------+  (submission failed)

    Only one form is live per instance. A submit while SUBMITTING is a
    no-op, so concurrent submits cause a single remote call.
    """

    def __init__(
        self,
        role_source: RoleSource,
        submitter: InvitationSubmitter,
        navigation: NavigationTarget,
        localization: LocalizationProvider,
        flash: FlashMessenger,
        role_catalog: RoleCatalog,
        authority_resolver: AuthorityResolver,
        validation_engine: ValidationEngine,
        submission_assembler: SubmissionAssembler,
        settings: InvitationSettings,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize use case.

        Args:
            role_source: Remote source of the role catalog
            submitter: Remote creator of invitations
            navigation: Navigation capability of the frontend
            localization: Localized string lookup
            flash: Confirmation message display
            role_catalog: Role catalog domain service
            authority_resolver: Authority domain service
            validation_engine: Validation domain service
            submission_assembler: Submission domain service
            settings: Invitation defaults
            clock: Source of the current time
        """
        self.role_source = role_source
        self.submitter = submitter
        self.navigation = navigation
        self.localization = localization
        self.flash = flash
        self.role_catalog = role_catalog
        self.authority_resolver = authority_resolver
        self.validation_engine = validation_engine
        self.submission_assembler = submission_assembler
        self.settings = settings
        self.clock = clock

        self.status = FormStatus.LOADING
        self.has_attempted_submit = False
        self.user: User | None = None
        self._state: InvitationDraftState | None = None

    async def execute(
        self, request: OpenInvitationFormRequest
    ) -> InvitationDraft | None:
        """Open the form for the requesting user.

        Args:
            request: User and navigation hint

        Returns:
            The initial draft, or None when the user may not invite
        """
        return await self.open(request.user, request.hint)

    async def open(
        self, user: User, hint: QueryHint | None = None
    ) -> InvitationDraft | None:
        """Load the catalog and initialize the draft.

        Users below INVITER are sent to the not-found page and the form
        stays LOADING.

        Args:
            user: The inviting user
            hint: Navigation hint naming a role and the invitation flow

        Returns:
            The initial draft, or None when the user may not invite

        Raises:
            CatalogLoadError: If the catalog could not be fetched; the form
                stays LOADING
        """
        hint = hint or QueryHint()
        with logfire.span(
            "invitation_form.open",
            user_id=str(user.id),
            hint_role_id=hint.role_id,
            maintainer=hint.maintainer,
        ):
            self.status = FormStatus.LOADING
            self.user = user
            self._state = None

            try:
                self.authority_resolver.require_authority(Authority.INVITER, user)
            except NotAuthorizedError as e:
                logfire.warn("User may not invite", user_id=str(user.id), error=str(e))
                self.navigation.go_to(NOT_FOUND_PATH)
                return None

            raw_groupings: list[RoleGrouping] = []
            if self.authority_resolver.is_user_allowed(Authority.MANAGER, user):
                try:
                    raw_groupings = await self.role_source.fetch_roles_for_applications(
                        user
                    )
                except CatalogLoadError as e:
                    logfire.error(
                        "Role catalog could not be loaded",
                        user_id=str(user.id),
                        error=str(e),
                    )
                    raise

            roles = self.role_catalog.load_roles(user, raw_groupings)
            self._state = InvitationDraftState(
                user=user,
                roles=roles,
                role_catalog=self.role_catalog,
                authority_resolver=self.authority_resolver,
                settings=self.settings,
                clock=self.clock,
            )
            draft = self._state.initialize(hint.role_id, hint.is_guest)
            self.has_attempted_submit = False
            self.status = FormStatus.READY
            return draft

    @property
    def state(self) -> InvitationDraftState:
        """Draft state to apply user edits to.

        Raises:
            BusinessRuleViolationError: If the form is not READY
        """
        if self.status != FormStatus.READY or self._state is None:
            raise BusinessRuleViolationError(
                f"Invitation form is not editable while {self.status.value}"
            )
        return self._state

    @property
    def draft(self) -> InvitationDraft | None:
        return self._state.draft if self._state else None

    def field_errors(self) -> FieldErrors:
        return self.validation_engine.field_errors(
            self.state.draft, self.has_attempted_submit
        )

    async def submit(self) -> RouteTarget | None:
        """Submit the draft.

        Returns:
            The route navigated to on success; None when the submit was
            ignored or the draft is invalid

        Raises:
            SubmissionError: If the remote side failed; the form returns to
                READY with the draft unchanged
        """
        if self.status != FormStatus.READY or self._state is None:
            logfire.info("Submit ignored", status=self.status.value)
            return None

        self.has_attempted_submit = True
        draft = self._state.draft
        if not self.validation_engine.is_valid(draft):
            errors = self.validation_engine.field_errors(draft, True)
            logfire.info(
                "Invitation draft invalid",
                role_required=errors.role_required,
                invitees_required=errors.invitees_required,
            )
            return None

        request = self.submission_assembler.build(draft)
        self.status = FormStatus.SUBMITTING
        with logfire.span(
            "invitation_form.submit",
            invite_count=len(request.invites),
            role_identifiers=request.role_identifiers,
            intended_authority=request.intended_authority.value,
        ):
            try:
                await self.submitter.create(request)
            except Exception as e:
                self.status = FormStatus.READY
                logfire.error("Invitation submission failed", error=str(e))
                raise

            route = self.submission_assembler.route_after_success(draft)
            self.status = FormStatus.SUCCESS
            self._state = None
            logfire.info(
                "Invitations created",
                invite_count=len(request.invites),
                route=route.path or route.kind.value,
            )
            self.flash.flash(self.localization.translate("invitations.createFlash"))
            self._navigate(route)
            return route

    def cancel(self) -> None:
        """Discard the draft and leave the form."""
        logfire.info("Invitation form cancelled", status=self.status.value)
        self._state = None
        self.navigation.go_back()

    def authority_options(self) -> list[AuthorityOption]:
        """Allowed authorities with their labels, highest first."""
        return [
            AuthorityOption(
                value=authority,
                label=self.localization.translate(f"access.{authority.value}"),
            )
            for authority in self.state.allowed_authorities()
        ]

    @property
    def show_authority_select(self) -> bool:
        return len(self.state.allowed_authorities()) > 1

    @property
    def title_key(self) -> str:
        """Localization key of the form title."""
        guest = self._state.guest if self._state else True
        return "invitations.newGuest" if guest else "invitations.new"

    @property
    def is_inviter_view(self) -> bool:
        """Plain inviters pick roles from cards instead of a selector."""
        if self.user is None:
            return False
        return (
            self.authority_resolver.highest_authority(self.user) == Authority.INVITER
        )

    def _navigate(self, route: RouteTarget) -> None:
        if route.kind == RouteKind.BACK:
            self.navigation.go_back()
        else:
            self.navigation.go_to(route.path)
