"""Invitation submitter interface."""

from abc import ABC, abstractmethod

from access.domain.model import InvitationRequest


class InvitationSubmitter(ABC):
    """Remote write creating the invitations."""

    @abstractmethod
    async def create(self, request: InvitationRequest) -> None:
        """Create the invitations described by the request.

        Args:
            request: The assembled invitation request

        Raises:
            SubmissionError: If the remote side rejected or failed the request
        """
        pass
