"""Local-first record store with an optional best-effort remote mirror.

Every mutation lands in the local cache synchronously. When a mirror is
configured the same document is pushed from a single background worker, so
pushes stay ordered; a failed push is logged and never reaches the caller.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from enum import StrEnum
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError

from rollcall.core.exceptions import StoreCorruptedError
from rollcall.core.protocols import ILocalCache, IMirror
from rollcall.models.attendance import AttendanceRecord
from rollcall.models.employee import Employee

logger = logging.getLogger(__name__)


class Collection(StrEnum):
    EMPLOYEES = "employees"
    ATTENDANCE = "attendance"
    CURRENT_USER = "currentUser"


_ADAPTERS: dict[Collection, TypeAdapter] = {
    Collection.EMPLOYEES: TypeAdapter(list[Employee]),
    Collection.ATTENDANCE: TypeAdapter(list[AttendanceRecord]),
    Collection.CURRENT_USER: TypeAdapter(Optional[str]),
}


class RecordStore:
    """Key-value persistence for the employees, attendance and current-user documents."""

    def __init__(self, cache: ILocalCache, mirror: IMirror | None = None) -> None:
        self._cache = cache
        self._mirror = mirror
        self._lock = threading.Lock()
        self._executor: ThreadPoolExecutor | None = None
        if mirror is not None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="rollcall-mirror")

    @property
    def has_mirror(self) -> bool:
        return self._mirror is not None

    # ---- collection access ----

    def get(self, collection: Collection) -> Any:
        """Validated contents of ``collection``; empty list (or None) when unset."""
        raw = self._cache.load(collection)
        if raw is None:
            return None if collection == Collection.CURRENT_USER else []
        try:
            return _ADAPTERS[collection].validate_json(raw)
        except ValidationError as exc:
            raise StoreCorruptedError(collection, str(exc)) from exc

    def set(self, collection: Collection, records: Any) -> None:
        """Replace ``collection`` wholesale."""
        adapter = _ADAPTERS[collection]
        document = adapter.dump_json(adapter.validate_python(records), by_alias=True).decode()
        with self._lock:
            self._cache.save(collection, document)
        self._dispatch(collection, document)

    def get_current_user(self) -> str | None:
        return self.get(Collection.CURRENT_USER)

    def set_current_user(self, employee_id: str | None) -> None:
        if employee_id is None:
            with self._lock:
                self._cache.delete(Collection.CURRENT_USER)
            self._dispatch(Collection.CURRENT_USER, None)
            return
        self.set(Collection.CURRENT_USER, employee_id)

    def remove_all(self) -> None:
        with self._lock:
            for collection in Collection:
                self._cache.delete(collection)
        for collection in Collection:
            self._dispatch(collection, None)

    # ---- mirror ----

    def start(self) -> bool:
        """Seed the local cache from the mirror once, then follow remote changes.

        Returns False when there is no mirror or it could not be reached; the
        local cache is then used as-is.
        """
        if self._mirror is None:
            return False
        keys = [c.value for c in Collection]
        try:
            snapshot = self._mirror.pull(keys)
        except Exception:
            logger.warning("Initial mirror pull failed; using local cache", exc_info=True)
            return False
        for key, document in snapshot.items():
            if document is not None:
                self._apply_remote(key, document)
        try:
            self._mirror.subscribe(self._apply_remote)
        except Exception:
            logger.warning("Mirror subscription failed; remote changes will not be followed", exc_info=True)
            return False
        logger.info("Local cache seeded from mirror (%d documents)",
                    sum(1 for d in snapshot.values() if d is not None))
        return True

    def _apply_remote(self, key: str, document: str | None) -> None:
        try:
            collection = Collection(key)
        except ValueError:
            logger.debug("Ignoring remote change for unknown key %r", key)
            return
        with self._lock:
            if document is None:
                self._cache.delete(collection)
                return
            try:
                _ADAPTERS[collection].validate_json(document)
            except ValidationError:
                logger.warning("Ignoring invalid remote document for %s", key, exc_info=True)
                return
            self._cache.save(collection, document)

    def _dispatch(self, key: str, document: str | None) -> None:
        if self._executor is None:
            return
        self._executor.submit(self._push, key, document)

    def _push(self, key: str, document: str | None) -> None:
        try:
            self._mirror.push(key, document)
        except Exception:
            logger.error("Mirror push failed for %s; local write kept", key, exc_info=True)

    def flush(self, timeout: float | None = None) -> None:
        """Block until every push queued so far has been attempted."""
        if self._executor is not None:
            self._executor.submit(lambda: None).result(timeout)

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        if self._mirror is not None:
            self._mirror.close()
