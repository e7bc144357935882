"""S3 archive backend implementing IFileStore for JSON data exports."""

from __future__ import annotations

import boto3
from botocore.exceptions import ClientError

from rollcall.core.exceptions import ArchiveError


class S3FileStore:
    """IFileStore backed by an S3 bucket.

    Paths handed to this store are relative to ``root_prefix``; listings
    return them relative again and sorted, oldest export name first.
    """

    def __init__(self, bucket: str, region: str = "us-east-1",
                 endpoint_url: str | None = None, root_prefix: str = "") -> None:
        self._bucket = bucket
        self._root = root_prefix
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("s3", **kwargs)

    def _object_key(self, path: str) -> str:
        return f"{self._root}{path}"

    def read(self, path: str) -> bytes:
        try:
            obj = self._client.get_object(Bucket=self._bucket, Key=self._object_key(path))
        except ClientError as exc:
            raise ArchiveError(f"Archive {path!r} could not be read from s3://{self._bucket}: {exc}") from exc
        return obj["Body"].read()

    def write(self, path: str, data: bytes, content_type: str = "application/json") -> str:
        try:
            self._client.put_object(
                Bucket=self._bucket,
                Key=self._object_key(path),
                Body=data,
                ContentType=content_type,
            )
        except ClientError as exc:
            raise ArchiveError(f"Archive {path!r} could not be written to s3://{self._bucket}: {exc}") from exc
        return path

    def list_files(self, prefix: str) -> list[str]:
        found: list[str] = []
        paginator = self._client.get_paginator("list_objects_v2")
        try:
            for page in paginator.paginate(Bucket=self._bucket, Prefix=self._object_key(prefix)):
                found.extend(obj["Key"][len(self._root):] for obj in page.get("Contents", []))
        except ClientError as exc:
            raise ArchiveError(f"Archive listing failed for prefix={prefix!r}: {exc}") from exc
        return sorted(found)
