"""File record repository. Returns application DTOs."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from filekeeper.application.dtos.file import FileRecordCreate, FileRecordResult
from filekeeper.infrastructure.persistence.models.file_record import FileRecord
from filekeeper.infrastructure.persistence.repositories.base import BaseRepository
from filekeeper.shared.utils import ensure_utc

logger = logging.getLogger(__name__)


def _create_to_file_record(r: FileRecordCreate) -> FileRecord:
    """Map FileRecordCreate (write-model) to ORM FileRecord for persistence."""
    return FileRecord(
        original_name=r.original_name,
        stored_name=r.stored_name,
        content_type=r.content_type,
        size=r.size,
    )


def _file_record_to_result(r: FileRecord) -> FileRecordResult:
    """Map ORM FileRecord to application FileRecordResult."""
    return FileRecordResult(
        id=r.id,
        original_name=r.original_name,
        stored_name=r.stored_name,
        content_type=r.content_type,
        size=r.size,
        created_at=ensure_utc(r.created_at),
    )


class FileRecordRepository(BaseRepository[FileRecord]):
    """File record repository. create_file() accepts FileRecordCreate; returns FileRecordResult."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, FileRecord)

    async def _get_orm_by_id(self, file_id: int) -> FileRecord | None:
        return await super().get_by_id(file_id)

    async def get_by_id(self, file_id: int) -> FileRecordResult | None:
        row = await self._get_orm_by_id(file_id)
        return _file_record_to_result(row) if row else None

    async def create_file(self, record: FileRecordCreate) -> FileRecordResult:
        """Insert and commit the record; id and created_at come from the database."""
        created = await super().create(_create_to_file_record(record))
        logger.debug("Created file record %s (%s)", created.id, created.stored_name)
        return _file_record_to_result(created)

    async def delete_file(self, file_id: int) -> bool:
        """Delete and commit the record. Returns False if it did not exist."""
        row = await self._get_orm_by_id(file_id)
        if row is None:
            return False
        await super().delete(row)
        return True
