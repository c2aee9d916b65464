"""Application DTOs (no dependency on ORM)."""

from filekeeper.application.dtos.file import FileRecordCreate, FileRecordResult, FileView

__all__ = ["FileRecordCreate", "FileRecordResult", "FileView"]
