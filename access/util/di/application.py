"""Application layer DI providers."""

from dishka import Scope, provide

from access.application.usecase.invitation import InvitationFormUseCase
from access.config import InvitationSettings
from access.domain.port import (
    FlashMessenger,
    InvitationSubmitter,
    LocalizationProvider,
    NavigationTarget,
    RoleSource,
)
from access.domain.service import (
    AuthorityResolver,
    RoleCatalog,
    SubmissionAssembler,
    ValidationEngine,
)
from access.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_invitation_form_use_case(
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
    ) -> InvitationFormUseCase:
        """Provide invitation form use case."""
        return InvitationFormUseCase(
            role_source=role_source,
            submitter=submitter,
            navigation=navigation,
            localization=localization,
            flash=flash,
            role_catalog=role_catalog,
            authority_resolver=authority_resolver,
            validation_engine=validation_engine,
            submission_assembler=submission_assembler,
            settings=settings,
        )
