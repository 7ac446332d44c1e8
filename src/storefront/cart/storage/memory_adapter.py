"""In-memory cart storage for tests and short-lived clients."""

from storefront.cart.storage.port import CartStorage


class MemoryCartStorage(CartStorage):
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(initial or {})
        self.writes: list[tuple[str, str]] = []

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        self.values[key] = value
