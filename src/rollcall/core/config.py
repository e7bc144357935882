"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class StoreConfig(BaseSettings):
    """Local document cache and mirror selection."""

    model_config = {"env_prefix": "ROLLCALL_STORE_"}

    cache_dir: str = ".rollcall-cache"
    mirror: Literal["none", "redis"] = "none"


class RedisConfig(BaseSettings):
    """Redis realtime mirror configuration."""

    model_config = {"env_prefix": "ROLLCALL_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0
    key_prefix: str = "rollcall:"
    channel: str = "rollcall:changes"


class S3Config(BaseSettings):
    """S3 export archive configuration."""

    model_config = {"env_prefix": "ROLLCALL_S3_"}

    bucket: str = ""  # empty disables archiving
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override
    export_prefix: str = "exports/"


class ImportConfig(BaseSettings):
    """CSV import heuristics."""

    model_config = {"env_prefix": "ROLLCALL_IMPORT_"}

    header_scan_lines: int = 30
    delimiter_sample_lines: int = 10
    email_domain: str = "company.com"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "ROLLCALL_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    store: StoreConfig = StoreConfig()
    redis: RedisConfig = RedisConfig()
    s3: S3Config = S3Config()
    imports: ImportConfig = ImportConfig()
