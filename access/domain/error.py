"""Errors raised by the invitation domain."""

from access.domain.value import Authority


class DomainError(Exception):
    """Base error of the invitation domain."""

    pass


class ValidationError(DomainError):
    """A draft is incomplete where completeness is required."""

    pass


class BusinessRuleViolationError(DomainError):
    """An edit breaks a rule of the draft, e.g. a disallowed authority."""

    pass


class NotAuthorizedError(DomainError):
    """The user lacks the authority an operation requires."""

    def __init__(self, user_id: str, required: Authority):
        self.user_id = user_id
        self.required = required
        super().__init__(
            f"User {user_id} requires at least {required.value} authority"
        )
