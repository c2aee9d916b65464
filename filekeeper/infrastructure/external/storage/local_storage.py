"""Local filesystem storage with path validation."""

from __future__ import annotations

import logging
from pathlib import Path

import aiofiles
import aiofiles.os

from filekeeper.infrastructure.exceptions import (
    StorageIOError,
    StorageNotFoundError,
    StoragePermissionError,
)

logger = logging.getLogger(__name__)


class LocalStorageService:
    """Local filesystem storage keyed by a flat name under storage_root.

    The root directory is created on first write. Keys that resolve outside
    storage_root are rejected with StoragePermissionError.
    """

    backend_name = "local"

    def __init__(self, storage_root: str | Path) -> None:
        """Initialize local storage.

        Args:
            storage_root: Base directory for all files (created lazily).
        """
        self.storage_root = Path(storage_root).resolve()

    def _get_full_path(self, key: str, operation: str) -> Path:
        """Resolve and validate path under storage_root. Raises StoragePermissionError if traversal."""
        full_path = (self.storage_root / key).resolve()
        try:
            full_path.relative_to(self.storage_root)
        except ValueError as e:
            logger.error("[FILE-ERROR] Rejected key outside storage root: %r", key)
            raise StoragePermissionError(key, operation) from e
        if full_path == self.storage_root:
            raise StoragePermissionError(key, operation)
        return full_path

    async def save(self, key: str, content: bytes) -> None:
        """Write content to storage_root/key, creating the root if needed."""
        target_path = self._get_full_path(key, "save")
        try:
            await aiofiles.os.makedirs(self.storage_root, exist_ok=True)
            logger.info("[LOCAL] Saving file %s (%d bytes)", key, len(content))
            async with aiofiles.open(target_path, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error("[FILE-ERROR] Failed to save file %s", key, exc_info=True)
            raise StorageIOError(key, "save", str(e)) from e

    async def load(self, key: str) -> bytes:
        """Read all bytes of storage_root/key."""
        file_path = self._get_full_path(key, "load")
        try:
            logger.info("[LOCAL] Loading file %s", key)
            async with aiofiles.open(file_path, "rb") as f:
                return await f.read()
        except FileNotFoundError as e:
            logger.error("[FILE-ERROR] File %s missing from %s", key, self.storage_root)
            raise StorageNotFoundError(key) from e
        except OSError as e:
            logger.error("[FILE-ERROR] Failed to load file %s", key, exc_info=True)
            raise StorageIOError(key, "load", str(e)) from e

    async def delete(self, key: str) -> None:
        """Remove storage_root/key."""
        file_path = self._get_full_path(key, "delete")
        try:
            logger.info("[LOCAL] Deleting file %s", key)
            await aiofiles.os.remove(file_path)
        except FileNotFoundError as e:
            logger.error("[FILE-ERROR] File %s missing from %s", key, self.storage_root)
            raise StorageNotFoundError(key) from e
        except OSError as e:
            logger.error("[FILE-ERROR] Failed to delete file %s", key, exc_info=True)
            raise StorageIOError(key, "delete", str(e)) from e

    async def exists(self, key: str) -> bool:
        """Return True if file exists."""
        try:
            return self._get_full_path(key, "exists").is_file()
        except StoragePermissionError:
            return False
