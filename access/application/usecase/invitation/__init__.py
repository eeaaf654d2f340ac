"""Invitation use cases."""

from access.application.usecase.invitation.invitation_form import (
    AuthorityOption,
    InvitationFormUseCase,
    OpenInvitationFormRequest,
)

__all__ = [
    "AuthorityOption",
    "InvitationFormUseCase",
    "OpenInvitationFormRequest",
]
