"""Cart storage port.

A string key-value store, the server-side stand-in for browser local
storage. Adapters hold one client's cart under ``girly-cart``.
"""

from abc import ABC, abstractmethod


class CartStorage(ABC):
    """Abstract cart storage interface."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None when nothing is saved."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...
