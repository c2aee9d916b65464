"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Storage backend selection is validated at load time.
"""

import os
import tempfile
from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

STORAGE_BACKENDS = ("local", "s3")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    storage_backend is the deployment profile: 'local' stores blobs under
    storage_root, 's3' stores them in s3_bucket.
    """

    # App
    app_name: str = "filekeeper"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (postgresql+asyncpg://... in production)
    database_url: str = "sqlite+aiosqlite:///./filekeeper.db"
    database_echo: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # Storage
    storage_backend: str = "local"
    storage_root: str = os.path.join(tempfile.gettempdir(), "files")
    s3_bucket: str | None = None
    s3_region: str = "us-east-1"
    s3_endpoint_url: str | None = None
    s3_access_key: str | None = None
    s3_secret_key: SecretStr | None = None
    max_upload_size: int = 10 * 1024 * 1024  # 10MB

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required_and_storage(self) -> "Settings":
        """Validate database URL and storage backend.

        - DATABASE_URL must be set.
        - STORAGE_BACKEND must be 'local' or 's3'; 's3' requires S3_BUCKET.
        """
        if not self.database_url:
            raise ValueError(
                "DATABASE_URL is required. Set in environment or .env file."
            )
        self.storage_backend = self.storage_backend.lower()
        if self.storage_backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"Invalid storage_backend '{self.storage_backend}'. "
                "Must be one of: 'local', 's3'"
            )
        if self.storage_backend == "s3" and not self.s3_bucket:
            raise ValueError(
                "s3_bucket is required when storage_backend is 's3'. "
                "Set S3_BUCKET environment variable or update .env file."
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.
    """
    return Settings()
