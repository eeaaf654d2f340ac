"""Dependency injection wiring."""

from typing import Type

from access.util.di.application import ProdApplicationProvider
from access.util.di.base import Component, ProviderBase
from access.util.di.core import ProdConfigProvider
from access.util.di.domain import ProdDomainProvider
from access.util.di.infrastructure import (
    AccessAPIProvider,
    FrontendProvider,
    ProdAccessAPIProvider,
)
from access.util.error import ConfigurationError

# Concrete providers and mockable component bases, in wiring order
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    FrontendProvider,
    AccessAPIProvider,
]


def is_mockable(base: Type[ProviderBase]) -> bool:
    return bool(base.__subclasses__())


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider base to the class to instantiate.

    Concrete providers are returned unchanged. For a mockable component
    the subclass whose ``__is_mock__`` equals ``use_mock`` is picked.

    Raises:
        ConfigurationError: If the component has no such implementation,
            e.g. a mock was asked for but the test doubles are not imported
    """
    if not is_mockable(base):
        return base

    implementations = {sub.__is_mock__: sub for sub in base.__subclasses__()}
    try:
        return implementations[use_mock]
    except KeyError:
        kind = "mock" if use_mock else "production"
        raise ConfigurationError(
            f"No {kind} provider for component {base.__mock_component__}"
        ) from None


__all__ = [
    "AccessAPIProvider",
    "Component",
    "FrontendProvider",
    "PROVIDERS",
    "ProdAccessAPIProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProviderBase",
    "get_provider",
    "is_mockable",
]
