"""Unit tests for JsonFileCache."""

from __future__ import annotations

import pytest

from rollcall.core.exceptions import StoreError
from rollcall.persistence.file_cache import JsonFileCache
from rollcall.persistence.record_store import Collection, RecordStore


@pytest.fixture
def cache(tmp_path):
    return JsonFileCache(tmp_path / "cache")


def test_load_missing_returns_none(cache):
    assert cache.load("employees") is None


def test_save_writes_one_file_per_key(cache, tmp_path):
    cache.save("employees", "[]")
    assert (tmp_path / "cache" / "employees.json").read_text() == "[]"


def test_save_overwrites_and_leaves_no_temp_files(cache, tmp_path):
    cache.save("attendance", "[1]")
    cache.save("attendance", "[2]")
    assert cache.load("attendance") == "[2]"
    assert sorted(p.name for p in (tmp_path / "cache").iterdir()) == ["attendance.json"]


def test_delete_missing_is_noop(cache):
    cache.delete("never_existed")  # should not raise


def test_store_survives_restart(tmp_path):
    RecordStore(JsonFileCache(tmp_path)).set(Collection.EMPLOYEES, [{"id": "EMP001"}])
    reopened = RecordStore(JsonFileCache(tmp_path))
    assert reopened.get(Collection.EMPLOYEES)[0].id == "EMP001"


def test_failed_replace_removes_temp_file(cache, tmp_path, monkeypatch):
    def broken_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("rollcall.persistence.file_cache.os.replace", broken_replace)
    with pytest.raises(StoreError):
        cache.save("employees", "[]")
    assert list((tmp_path / "cache").iterdir()) == []
