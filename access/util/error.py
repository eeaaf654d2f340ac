"""Errors raised while wiring the application."""


class UtilError(Exception):
    """Base error of the utility layer."""

    pass


class ConfigurationError(UtilError):
    """Settings or providers cannot be turned into a working setup."""

    pass
