"""Test configuration and fixtures."""

import pytest

from access.adapter.frontend import MessageCatalog
from access.config import InvitationSettings
from access.domain.service import (
    AuthorityResolver,
    RoleCatalog,
    SubmissionAssembler,
    ValidationEngine,
)


@pytest.fixture
def invitation_settings() -> InvitationSettings:
    return InvitationSettings()


@pytest.fixture
def authority_resolver() -> AuthorityResolver:
    return AuthorityResolver()


@pytest.fixture
def role_catalog(authority_resolver) -> RoleCatalog:
    return RoleCatalog(
        authority_resolver=authority_resolver,
        localization=MessageCatalog(),
        locale="en",
    )


@pytest.fixture
def validation_engine() -> ValidationEngine:
    return ValidationEngine()


@pytest.fixture
def submission_assembler() -> SubmissionAssembler:
    return SubmissionAssembler()
