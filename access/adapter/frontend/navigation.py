"""In-memory navigation and flash message recorders.

Used when the core runs outside a browser, e.g. in tests or scripted
invitation runs; the frontend supplies its own router otherwise.
"""

import logfire

from access.domain.port import FlashMessenger, NavigationTarget

BACK = ".."


class InMemoryNavigator(NavigationTarget):
    """Records every navigation in ``history``.

    A step back is recorded as ``".."``.
    """

    def __init__(self) -> None:
        self.history: list[str] = []

    def go_to(self, path: str) -> None:
        logfire.debug("Navigate", path=path)
        self.history.append(path)

    def go_back(self) -> None:
        logfire.debug("Navigate back")
        self.history.append(BACK)

    @property
    def current(self) -> str | None:
        return self.history[-1] if self.history else None


class InMemoryFlashMessenger(FlashMessenger):
    """Keeps flashed messages in ``messages``."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def flash(self, message: str) -> None:
        self.messages.append(message)
