"""DTOs for file use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class FileRecordCreate:
    """Input for creating a file record (write-model). Use case builds this; repo persists and returns FileRecordResult."""

    original_name: str
    stored_name: str
    content_type: str
    size: int


@dataclass(frozen=True)
class FileRecordResult:
    """File record read-model (result of create and get_by_id)."""

    id: int
    original_name: str
    stored_name: str
    content_type: str
    size: int
    created_at: datetime


@dataclass(frozen=True)
class FileView:
    """Transient download view: metadata plus the full byte content. Never persisted."""

    name: str
    content_type: str
    size: int
    content: bytes
