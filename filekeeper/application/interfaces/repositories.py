"""Repository interfaces (ports) for the application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from filekeeper.application.dtos.file import FileRecordCreate, FileRecordResult


class IFileRecordRepository(Protocol):
    """Protocol for file record repository (DIP). Each write commits on its own."""

    async def create_file(self, record: FileRecordCreate) -> FileRecordResult:
        """Persist a new record; the store assigns id and created_at."""

    async def get_by_id(self, file_id: int) -> FileRecordResult | None:
        """Return record by id, or None."""

    async def delete_file(self, file_id: int) -> bool:
        """Delete record by id. Returns True if a row was removed."""
