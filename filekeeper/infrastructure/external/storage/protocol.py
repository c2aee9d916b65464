"""Storage service protocol (DIP). Implementations: LocalStorageService, S3StorageService."""

from typing import Protocol


class StorageProtocol(Protocol):
    """Protocol for blob storage backends (local, S3-compatible).

    Content is materialized fully in memory on both paths. Failures raise
    subclasses of StorageException.
    """

    backend_name: str

    async def save(self, key: str, content: bytes) -> None:
        """Write content under key, overwriting any existing blob."""
        ...

    async def load(self, key: str) -> bytes:
        """Return the full content stored under key."""
        ...

    async def delete(self, key: str) -> None:
        """Remove the blob under key. Raises StorageNotFoundError if absent."""
        ...

    async def exists(self, key: str) -> bool:
        """Return True if a blob is stored under key."""
        ...
