"""Provider base class."""

from typing import ClassVar, Literal

from dishka import Provider

# Components a test container can swap for an in-memory double
Component = Literal["access_api"]


class ProviderBase(Provider):
    """dishka provider carrying mock metadata.

    A provider class without subclasses is concrete. A mockable component
    is a base class naming ``__mock_component__`` with one production and
    one mock subclass, told apart by ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
