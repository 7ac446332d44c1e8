"""File-backed cart storage: one JSON blob per key inside a client directory."""

import os
from pathlib import Path

from storefront.cart.storage.port import CartStorage


class FileCartStorage(CartStorage):
    """Persist each key as ``<directory>/<key>.json``.

    The directory defaults to ``CART_STORAGE_DIR`` (or ``.carts``) and is
    created on first write.
    """

    def __init__(self, directory: str | Path | None = None) -> None:
        self.directory = Path(directory or os.getenv("CART_STORAGE_DIR", ".carts"))

    def _path_for(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path_for(key)
        tmp_path = path.with_suffix(".tmp")
        tmp_path.write_text(value, encoding="utf-8")
        tmp_path.replace(path)
