"""Access API adapter."""

from .client import AccessAPIClient, HttpAccessClient, InMemoryAccessClient

__all__ = ["AccessAPIClient", "HttpAccessClient", "InMemoryAccessClient"]
