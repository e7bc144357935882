"""Shared test doubles: memory backends and a repository builder."""

from __future__ import annotations

from rollcall.persistence.memory_backend import MemoryFileStore, MemoryLocalCache, MemoryMirror
from rollcall.persistence.record_store import RecordStore
from rollcall.services.attendance_repository import AttendanceRepository

__all__ = [
    "MemoryFileStore",
    "MemoryLocalCache",
    "MemoryMirror",
    "make_repository",
]


def make_repository(mirror: MemoryMirror | None = None) -> AttendanceRepository:
    """Repository over a fresh in-memory store."""
    return AttendanceRepository(RecordStore(MemoryLocalCache(), mirror))
