"""Integration test fixtures: a live Redis server and LocalStack S3."""

from __future__ import annotations

import os
import uuid

import boto3
import pytest
import redis

LOCALSTACK_URL = os.environ.get("LOCALSTACK_URL", "http://localhost:4566")
REDIS_HOST = os.environ.get("ROLLCALL_REDIS_HOST", "localhost")
REDIS_PORT = int(os.environ.get("ROLLCALL_REDIS_PORT", "6379"))
ARCHIVE_BUCKET = "rollcall-inttest"


def _redis_available() -> bool:
    try:
        return bool(redis.Redis(host=REDIS_HOST, port=REDIS_PORT, socket_connect_timeout=1).ping())
    except redis.RedisError:
        return False


def _localstack_available() -> bool:
    try:
        boto3.client("s3", region_name="us-east-1", endpoint_url=LOCALSTACK_URL).list_buckets()
        return True
    except Exception:
        return False


skip_no_redis = pytest.mark.skipif(not _redis_available(), reason="Redis not available")
skip_no_localstack = pytest.mark.skipif(not _localstack_available(), reason="LocalStack not available")


@pytest.fixture
def redis_namespace():
    """Unique key prefix and channel per test; keys are removed afterwards."""
    prefix = f"rollcall-inttest:{uuid.uuid4().hex}:"
    yield prefix, f"{prefix}changes"
    client = redis.Redis(host=REDIS_HOST, port=REDIS_PORT)
    for key in client.scan_iter(f"{prefix}*"):
        client.delete(key)


@pytest.fixture(scope="session")
def archive_bucket():
    """S3 bucket on LocalStack for export archives."""
    client = boto3.client("s3", region_name="us-east-1", endpoint_url=LOCALSTACK_URL)
    try:
        client.create_bucket(Bucket=ARCHIVE_BUCKET)
    except client.exceptions.BucketAlreadyOwnedByYou:
        pass
    return ARCHIVE_BUCKET
