"""Whole-store JSON export/import, optionally archived to a file store."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from rollcall.core.exceptions import ArchiveError
from rollcall.core.protocols import IFileStore
from rollcall.models.snapshot import DataSnapshot
from rollcall.persistence.record_store import Collection, RecordStore

logger = logging.getLogger(__name__)


class DataTransferService:
    """Moves the employees and attendance collections in and out as one document."""

    def __init__(self, store: RecordStore, file_store: IFileStore | None = None) -> None:
        self._store = store
        self._files = file_store

    def export_data(self) -> DataSnapshot:
        return DataSnapshot(
            employees=self._store.get(Collection.EMPLOYEES),
            attendance=self._store.get(Collection.ATTENDANCE),
        )

    def import_data(self, snapshot: DataSnapshot | str | bytes) -> DataSnapshot:
        """Overwrite every collection present in ``snapshot``; absent ones are untouched."""
        if not isinstance(snapshot, DataSnapshot):
            snapshot = DataSnapshot.model_validate_json(snapshot)
        if snapshot.employees is not None:
            self._store.set(Collection.EMPLOYEES, snapshot.employees)
        if snapshot.attendance is not None:
            self._store.set(Collection.ATTENDANCE, snapshot.attendance)
        logger.info(
            "Imported snapshot: %s employees, %s attendance records",
            "-" if snapshot.employees is None else len(snapshot.employees),
            "-" if snapshot.attendance is None else len(snapshot.attendance),
        )
        return snapshot

    # ---- archives ----

    @staticmethod
    def archive_name(when: datetime | None = None) -> str:
        when = when or datetime.now(timezone.utc)
        return f"attendance-data-{when.date().isoformat()}.json"

    def archive_export(self) -> str:
        """Write the current export to the file store; returns its path."""
        files = self._require_files()
        snapshot = self.export_data()
        path = self.archive_name(snapshot.exported_at)
        body = snapshot.model_dump_json(by_alias=True, indent=2).encode("utf-8")
        return files.write(path, body)

    def list_archives(self) -> list[str]:
        return self._require_files().list_files("attendance-data-")

    def load_archive(self, path: str) -> DataSnapshot:
        """Import the archived export at ``path``."""
        return self.import_data(self._require_files().read(path))

    def _require_files(self) -> IFileStore:
        if self._files is None:
            raise ArchiveError("No export archive is configured")
        return self._files
