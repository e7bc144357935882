"""In-memory backends for unit tests and local development; dict-backed fakes."""

from __future__ import annotations

from rollcall.core.exceptions import MirrorError
from rollcall.core.protocols import ChangeCallback


class MemoryLocalCache:
    """Dict-backed ILocalCache."""

    def __init__(self) -> None:
        self._store: dict[str, str] = {}

    def load(self, key: str) -> str | None:
        return self._store.get(key)

    def save(self, key: str, value: str) -> None:
        self._store[key] = value

    def delete(self, key: str) -> None:
        self._store.pop(key, None)


class MemoryMirror:
    """Dict-backed IMirror.

    ``fail`` makes every call raise MirrorError; ``emit_change`` simulates a
    write made by another client.
    """

    def __init__(self, documents: dict[str, str] | None = None) -> None:
        self.documents: dict[str, str] = dict(documents or {})
        self.pushes: list[tuple[str, str | None]] = []
        self.fail = False
        self.closed = False
        self._subscribers: list[ChangeCallback] = []

    def _check(self) -> None:
        if self.fail:
            raise MirrorError("memory mirror unavailable")

    def pull(self, keys: list[str]) -> dict[str, str | None]:
        self._check()
        return {key: self.documents.get(key) for key in keys}

    def push(self, key: str, value: str | None) -> None:
        self._check()
        self.pushes.append((key, value))
        if value is None:
            self.documents.pop(key, None)
        else:
            self.documents[key] = value

    def subscribe(self, on_change: ChangeCallback) -> None:
        self._check()
        self._subscribers.append(on_change)

    def emit_change(self, key: str, value: str | None) -> None:
        if value is None:
            self.documents.pop(key, None)
        else:
            self.documents[key] = value
        for callback in self._subscribers:
            callback(key, value)

    def close(self) -> None:
        self.closed = True
        self._subscribers.clear()


class MemoryFileStore:
    """Dict-backed IFileStore."""

    def __init__(self) -> None:
        self._files: dict[str, bytes] = {}

    def read(self, path: str) -> bytes:
        return self._files[path]

    def write(self, path: str, data: bytes, content_type: str = "application/json") -> str:
        self._files[path] = data
        return path

    def list_files(self, prefix: str) -> list[str]:
        return sorted(k for k in self._files if k.startswith(prefix))
