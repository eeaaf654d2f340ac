"""Mock providers for testing."""

from .access_api import MockAccessAPIProvider
from .container import build_test_container

__all__ = [
    "MockAccessAPIProvider",
    "build_test_container",
]
