"""File service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from filekeeper.application.use_cases.files import FileService
from filekeeper.infrastructure.external.storage import StorageProtocol
from filekeeper.infrastructure.persistence.database import get_db
from filekeeper.infrastructure.persistence.repositories import FileRecordRepository


def get_storage_service(request: Request) -> StorageProtocol:
    """Storage backend chosen once at startup (app.state.storage)."""
    return request.app.state.storage


async def get_file_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> FileRecordRepository:
    return FileRecordRepository(db)


async def get_file_service(
    storage: Annotated[StorageProtocol, Depends(get_storage_service)],
    file_repo: Annotated[FileRecordRepository, Depends(get_file_repo)],
) -> FileService:
    """Build FileService for upload, download, lookup, and delete."""
    return FileService(storage_service=storage, file_repo=file_repo)
