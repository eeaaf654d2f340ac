"""Domain layer DI providers."""

from dishka import Scope, provide

from access.config import Settings
from access.domain.port import LocalizationProvider
from access.domain.service import (
    AuthorityResolver,
    RoleCatalog,
    SubmissionAssembler,
    ValidationEngine,
)
from access.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped; each opened form gets fresh
    instances.
    """

    scope = Scope.REQUEST

    @provide
    def get_authority_resolver(self) -> AuthorityResolver:
        """Provide authority domain service."""
        return AuthorityResolver()

    @provide
    def get_role_catalog(
        self,
        authority_resolver: AuthorityResolver,
        localization: LocalizationProvider,
        settings: Settings,
    ) -> RoleCatalog:
        """Provide role catalog domain service."""
        return RoleCatalog(
            authority_resolver=authority_resolver,
            localization=localization,
            locale=settings.locale,
        )

    @provide
    def get_validation_engine(self) -> ValidationEngine:
        """Provide validation domain service."""
        return ValidationEngine()

    @provide
    def get_submission_assembler(self) -> SubmissionAssembler:
        """Provide submission domain service."""
        return SubmissionAssembler()
