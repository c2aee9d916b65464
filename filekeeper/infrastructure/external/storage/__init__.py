"""Storage: local filesystem and S3-compatible backends.

StorageFactory picks the backend from filekeeper.core.config. Implementations
are imported lazily inside StorageFactory.create_storage_service() so the
local profile never imports boto3.

Implementations satisfy StorageProtocol (save, load, delete, exists).
"""

from filekeeper.infrastructure.external.storage.factory import StorageFactory
from filekeeper.infrastructure.external.storage.protocol import StorageProtocol

__all__ = [
    "StorageFactory",
    "StorageProtocol",
]
