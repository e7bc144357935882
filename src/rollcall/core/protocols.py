"""Protocol interfaces for the storage seams of the record store.

Backends satisfy these structurally; the memory backends in
``rollcall.persistence.memory_backend`` are the reference implementations.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

# (collection key, JSON document or None when the key was removed)
ChangeCallback = Callable[[str, "str | None"], None]


# ---------------------------------------------------------------------------
# Persistence: Local Cache
# ---------------------------------------------------------------------------

@runtime_checkable
class ILocalCache(Protocol):
    """Synchronous durable key -> JSON document cache."""

    def load(self, key: str) -> str | None: ...

    def save(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


# ---------------------------------------------------------------------------
# Persistence: Remote Mirror
# ---------------------------------------------------------------------------

@runtime_checkable
class IMirror(Protocol):
    """Remote realtime document store mirrored by the record store."""

    def pull(self, keys: list[str]) -> dict[str, str | None]: ...

    def push(self, key: str, value: str | None) -> None: ...

    def subscribe(self, on_change: ChangeCallback) -> None: ...

    def close(self) -> None: ...


# ---------------------------------------------------------------------------
# Persistence: File Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IFileStore(Protocol):
    """S3-compatible file storage interface for export archives."""

    def read(self, path: str) -> bytes: ...

    def write(self, path: str, data: bytes, content_type: str = "application/json") -> str: ...

    def list_files(self, prefix: str) -> list[str]: ...
