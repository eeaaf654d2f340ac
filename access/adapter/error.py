"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """External access API error."""

    pass


class CatalogLoadError(ProviderError):
    """Fetching the role catalog failed."""

    pass


class SubmissionError(ProviderError):
    """Creating the invitation failed remotely."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
