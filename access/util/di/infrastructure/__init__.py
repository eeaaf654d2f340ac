"""Infrastructure providers."""

# Import bases
from .access_api import AccessAPIProvider
from .frontend import FrontendProvider

# Import implementations (needed for __subclasses__())
from .access_api import ProdAccessAPIProvider  # noqa: F401

__all__ = [
    "AccessAPIProvider",
    "FrontendProvider",
    "ProdAccessAPIProvider",
]
