"""Domain service base class."""


class Service:
    """Base class of the invitation domain services.

    Services hold no state of their own, except ``InvitationDraftState``
    which owns the draft of one opened form.
    """

    pass
