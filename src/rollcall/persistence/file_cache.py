"""Directory-of-JSON-files local cache implementing ILocalCache."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from rollcall.core.exceptions import StoreError


class JsonFileCache:
    """One ``<key>.json`` file per collection; writes replace the file atomically."""

    def __init__(self, directory: str | Path) -> None:
        self._dir = Path(directory)
        self._dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self._dir / f"{key}.json"

    def load(self, key: str) -> str | None:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StoreError(f"Cache read failed for key={key!r}: {exc}") from exc

    def save(self, key: str, value: str) -> None:
        tmp = None
        try:
            fd, tmp = tempfile.mkstemp(dir=self._dir, prefix=f".{key}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp, self._path(key))
        except OSError as exc:
            if tmp is not None:
                Path(tmp).unlink(missing_ok=True)
            raise StoreError(f"Cache write failed for key={key!r}: {exc}") from exc

    def delete(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as exc:
            raise StoreError(f"Cache delete failed for key={key!r}: {exc}") from exc
