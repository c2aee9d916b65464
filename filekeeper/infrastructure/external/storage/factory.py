"""Storage service factory: creates local or S3 backend from settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from filekeeper.infrastructure.external.storage.protocol import StorageProtocol

if TYPE_CHECKING:
    from filekeeper.core.config import Settings

logger = logging.getLogger(__name__)


class StorageFactory:
    """Factory for storage service instances based on configuration."""

    @staticmethod
    def create_storage_service(settings: "Settings | None" = None) -> StorageProtocol:
        """Create storage service from settings.

        Called once when the application is built; the instance is then
        injected into FileService per request.

        Args:
            settings: Application settings; if None, uses get_settings().

        Returns:
            LocalStorageService or S3StorageService.

        Raises:
            ValueError: Unknown backend or missing required config.
        """
        from filekeeper.core.config import get_settings

        s = settings or get_settings()
        backend = s.storage_backend.lower()

        if backend == "local":
            from filekeeper.infrastructure.external.storage.local_storage import (
                LocalStorageService,
            )

            if not s.storage_root:
                raise ValueError("STORAGE_ROOT required for local backend")
            logger.info("Using local storage backend at %s", s.storage_root)
            return LocalStorageService(storage_root=s.storage_root)
        if backend == "s3":
            if not s.s3_bucket:
                raise ValueError("S3_BUCKET required for s3 backend")
            from filekeeper.infrastructure.external.storage.s3_storage import (
                S3StorageService,
            )

            logger.info("Using S3 storage backend with bucket %s", s.s3_bucket)
            return S3StorageService(
                bucket=s.s3_bucket,
                region=s.s3_region,
                endpoint_url=s.s3_endpoint_url,
                access_key=s.s3_access_key,
                secret_key=(
                    s.s3_secret_key.get_secret_value() if s.s3_secret_key else None
                ),
            )
        raise ValueError(
            f"Unknown storage backend: {backend}. Supported: 'local', 's3'"
        )
