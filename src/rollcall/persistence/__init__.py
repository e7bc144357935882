"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from rollcall.core.config import AppSettings
from rollcall.core.protocols import IFileStore
from rollcall.persistence.file_cache import JsonFileCache
from rollcall.persistence.record_store import Collection, RecordStore
from rollcall.persistence.redis_backend import RedisMirror
from rollcall.persistence.s3_backend import S3FileStore

__all__ = ["Collection", "RecordStore", "create_file_store", "create_store"]


def create_store(settings: AppSettings | None = None) -> RecordStore:
    """Create a record store wired to the configured cache and mirror.

    The caller decides when to run ``RecordStore.start()``.
    """
    if settings is None:
        settings = AppSettings()

    cache = JsonFileCache(settings.store.cache_dir)

    mirror = None
    if settings.store.mirror == "redis":
        mirror = RedisMirror(
            host=settings.redis.host,
            port=settings.redis.port,
            db=settings.redis.db,
            key_prefix=settings.redis.key_prefix,
            channel=settings.redis.channel,
        )

    return RecordStore(cache, mirror)


def create_file_store(settings: AppSettings | None = None) -> IFileStore | None:
    """S3 archive store, or None when no bucket is configured."""
    if settings is None:
        settings = AppSettings()
    if not settings.s3.bucket:
        return None
    return S3FileStore(
        bucket=settings.s3.bucket,
        region=settings.s3.region,
        endpoint_url=settings.s3.endpoint_url,
        root_prefix=settings.s3.export_prefix,
    )
