"""FileRecord ORM model. Metadata of a stored file; bytes live in the storage backend."""

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from filekeeper.infrastructure.persistence.database import Base
from filekeeper.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    IntegerIdMixin,
)


class FileRecord(IntegerIdMixin, CreatedAtMixin, Base):
    """File record. Table: file_record. stored_name is the storage backend key."""

    __tablename__ = "file_record"

    original_name: Mapped[str] = mapped_column(String(255), nullable=False)
    stored_name: Mapped[str] = mapped_column(String(300), nullable=False, index=True)
    content_type: Mapped[str] = mapped_column(String(255), nullable=False)
    size: Mapped[int] = mapped_column(BigInteger, nullable=False)
