"""Dictionary-backed message catalog."""

from access.domain.port import LocalizationProvider

# English strings used by the invitation core
MESSAGES: dict[str, str] = {
    "access.GUEST": "Guest",
    "access.INVITER": "Inviter",
    "access.MANAGER": "Manager",
    "access.INSTITUTION_ADMIN": "Institution admin",
    "access.SUPER_USER": "Super user",
    "roles.multiple": "Multiple applications",
    "invitations.new": "New invitation",
    "invitations.newGuest": "New guest invitation",
    "invitations.createFlash": "Invitations have been sent",
    "invitations.requiredRole": "At least one role is required",
    "invitations.requiredEmail": "At least one invitee is required",
    "invitations.roleExpiryDateInfo": "The role expires on {expiry}",
}


class MessageCatalog(LocalizationProvider):
    """Looks up ``{name}`` templates in a dictionary.

    Missing keys are returned as-is so a gap in the catalog is visible
    instead of fatal.
    """

    def __init__(self, messages: dict[str, str] | None = None) -> None:
        self.messages = dict(MESSAGES if messages is None else messages)

    def translate(self, key: str, **args: object) -> str:
        template = self.messages.get(key)
        if template is None:
            return key
        return template.format(**args) if args else template
