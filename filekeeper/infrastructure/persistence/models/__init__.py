"""Persistence models: ORM entities and mixins."""

from filekeeper.infrastructure.persistence.models.file_record import FileRecord

__all__ = ["FileRecord"]
