"""Storage interface (port) used by the file use case."""

from typing import Protocol


class IStorageService(Protocol):
    """Blob storage keyed by stored name. Raises StorageException subclasses."""

    backend_name: str

    async def save(self, key: str, content: bytes) -> None: ...

    async def load(self, key: str) -> bytes: ...

    async def delete(self, key: str) -> None: ...

    async def exists(self, key: str) -> bool: ...
