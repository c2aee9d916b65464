"""File operations: pair a metadata record with a blob in the storage backend.

The two writes are not atomic. save() commits the record before writing the
blob, so a failed write leaves an orphan record (logged, not repaired).
delete() removes the blob before the record, so a failed blob delete keeps
the record.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable

from filekeeper.application.dtos.file import FileRecordCreate, FileRecordResult, FileView
from filekeeper.application.interfaces.repositories import IFileRecordRepository
from filekeeper.application.interfaces.storage import IStorageService
from filekeeper.domain.exceptions import (
    FileNotFoundException,
    FileSaveException,
    ValidationException,
)
from filekeeper.infrastructure.exceptions import StorageIOError, StoragePermissionError
from filekeeper.shared.utils import current_millis

logger = logging.getLogger(__name__)


def _sanitize_filename(filename: str) -> str:
    """Strip path separators and dangerous characters from filename."""
    name = os.path.basename(filename.replace("\\", "/"))
    name = name.replace("\x00", "").strip(". ")
    if not name:
        raise ValidationException(
            "Filename is empty or invalid after sanitization", field="file"
        )
    return name


def generate_stored_name(original_name: str, millis: int) -> str:
    """Return the storage key '<millis>_<sanitized name>'."""
    return f"{millis}_{_sanitize_filename(original_name)}"


class FileService:
    """Orchestrates FileRecordRepository (metadata) and the storage backend (bytes)."""

    def __init__(
        self,
        storage_service: IStorageService,
        file_repo: IFileRecordRepository,
        clock: Callable[[], int] = current_millis,
    ) -> None:
        self.storage = storage_service
        self.file_repo = file_repo
        self._clock = clock

    async def save(
        self,
        original_name: str,
        content_type: str,
        size: int,
        content: bytes,
    ) -> FileRecordResult:
        """Create the metadata record, then write the bytes under its stored name.

        Raises:
            ValidationException: original_name is unusable as a storage key.
            FileSaveException: local medium failed; the record stays (orphan).
            StorageClientError / StorageServiceError: remote store failed; the record stays.
        """
        stored_name = generate_stored_name(original_name, self._clock())
        record = await self.file_repo.create_file(
            FileRecordCreate(
                original_name=original_name,
                stored_name=stored_name,
                content_type=content_type,
                size=size,
            )
        )
        try:
            await self.storage.save(record.stored_name, content)
        except (StorageIOError, StoragePermissionError) as e:
            logger.warning(
                "[FILE-ERROR] Blob write failed; file record %s left without content",
                record.id,
            )
            raise FileSaveException(record.id, record.stored_name, e.message) from e
        except Exception:
            logger.warning(
                "Blob write failed; file record %s left without content", record.id
            )
            raise
        logger.info(
            "Saved file %s as %s (%d bytes, %s backend)",
            record.id,
            record.stored_name,
            len(content),
            self.storage.backend_name,
        )
        return record

    async def get_record(self, file_id: int) -> FileRecordResult:
        """Return the metadata record; raise FileNotFoundException if absent."""
        record = await self.file_repo.get_by_id(file_id)
        if record is None:
            raise FileNotFoundException(file_id)
        return record

    async def load(self, file_id: int) -> FileView:
        """Return metadata and bytes of a file.

        A record whose blob is missing surfaces StorageNotFoundError (server error).
        """
        record = await self.get_record(file_id)
        content = await self.storage.load(record.stored_name)
        return FileView(
            name=record.original_name,
            content_type=record.content_type,
            size=record.size,
            content=content,
        )

    async def delete(self, file_id: int) -> None:
        """Delete the blob, then the metadata record."""
        record = await self.get_record(file_id)
        await self.storage.delete(record.stored_name)
        if not await self.file_repo.delete_file(record.id):
            raise FileNotFoundException(file_id)
        logger.info("Deleted file %s (%s)", record.id, record.stored_name)
