"""Persistence repositories. Re-exports for dependency injection."""

from filekeeper.infrastructure.persistence.repositories.base import BaseRepository
from filekeeper.infrastructure.persistence.repositories.file_record_repo import (
    FileRecordRepository,
)

__all__ = [
    "BaseRepository",
    "FileRecordRepository",
]
