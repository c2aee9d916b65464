"""File use cases: save, load, and delete (metadata + blob orchestration)."""

from filekeeper.application.use_cases.files.file_operations import FileService

__all__ = ["FileService"]
