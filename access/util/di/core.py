"""Configuration providers."""

from dishka import Scope, from_context, provide

from access.config import InvitationSettings, Settings
from access.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings handed to the container when it is built."""

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        return settings.invitations
