"""File record repository integration tests against in-memory SQLite."""

from datetime import timezone

import pytest

from filekeeper.application.dtos.file import FileRecordCreate
from filekeeper.infrastructure.persistence.repositories import FileRecordRepository


def _create(name: str = "a.txt") -> FileRecordCreate:
    return FileRecordCreate(
        original_name=name,
        stored_name=f"1700000000000_{name}",
        content_type="text/plain",
        size=5,
    )


@pytest.mark.requires_db
async def test_create_file_and_get_by_id(db_session) -> None:
    """Create a record then read it back; id and created_at come from the database."""
    repo = FileRecordRepository(db_session)
    created = await repo.create_file(_create())
    assert created.id > 0
    assert created.created_at.tzinfo == timezone.utc

    found = await repo.get_by_id(created.id)
    assert found == created


@pytest.mark.requires_db
async def test_ids_are_distinct(db_session) -> None:
    repo = FileRecordRepository(db_session)
    first = await repo.create_file(_create("a.txt"))
    second = await repo.create_file(_create("b.txt"))
    assert first.id != second.id


@pytest.mark.requires_db
async def test_get_by_id_missing_returns_none(db_session) -> None:
    assert await FileRecordRepository(db_session).get_by_id(99999) is None


@pytest.mark.requires_db
async def test_delete_file(db_session) -> None:
    repo = FileRecordRepository(db_session)
    created = await repo.create_file(_create())
    assert await repo.delete_file(created.id) is True
    assert await repo.get_by_id(created.id) is None
    assert await repo.delete_file(created.id) is False


@pytest.mark.requires_db
async def test_create_is_committed(db_schema, db_session) -> None:
    """A created record is visible from a separate session (own transaction)."""
    from filekeeper.infrastructure.persistence.database import get_session_factory

    created = await FileRecordRepository(db_session).create_file(_create())
    async with get_session_factory()() as other:
        assert await FileRecordRepository(other).get_by_id(created.id) is not None
