"""Cart storage factory.

Provides get_storage() / set_storage() to swap implementations:
- MemoryCartStorage for development and testing
- FileCartStorage for clients that keep their cart between runs
"""

from storefront.cart.storage.memory_adapter import MemoryCartStorage
from storefront.cart.storage.port import CartStorage

_current_storage: CartStorage | None = None


def get_storage() -> CartStorage:
    """Return the current cart storage. Defaults to MemoryCartStorage."""
    global _current_storage
    if _current_storage is None:
        _current_storage = MemoryCartStorage()
    return _current_storage


def set_storage(storage: CartStorage) -> None:
    """Override the active cart storage (useful for tests)."""
    global _current_storage
    _current_storage = storage


def reset_storage() -> None:
    """Reset to default storage."""
    global _current_storage
    _current_storage = None
