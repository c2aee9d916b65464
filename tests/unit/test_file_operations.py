"""Unit tests for FileService and stored-name generation (in-memory fakes)."""

from datetime import datetime, timezone

import pytest

from filekeeper.application.dtos.file import FileRecordCreate, FileRecordResult
from filekeeper.application.use_cases.files import FileService
from filekeeper.application.use_cases.files.file_operations import (
    _sanitize_filename,
    generate_stored_name,
)
from filekeeper.domain.exceptions import (
    FileNotFoundException,
    FileSaveException,
    ValidationException,
)
from filekeeper.infrastructure.exceptions import (
    StorageIOError,
    StorageNotFoundError,
    StorageServiceError,
)


class InMemoryFileRecordRepo:
    def __init__(self) -> None:
        self.rows: dict[int, FileRecordResult] = {}
        self._next_id = 1

    async def create_file(self, record: FileRecordCreate) -> FileRecordResult:
        result = FileRecordResult(
            id=self._next_id,
            original_name=record.original_name,
            stored_name=record.stored_name,
            content_type=record.content_type,
            size=record.size,
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )
        self.rows[result.id] = result
        self._next_id += 1
        return result

    async def get_by_id(self, file_id: int) -> FileRecordResult | None:
        return self.rows.get(file_id)

    async def delete_file(self, file_id: int) -> bool:
        return self.rows.pop(file_id, None) is not None


class InMemoryStorage:
    backend_name = "memory"

    def __init__(self, fail_with: Exception | None = None) -> None:
        self.blobs: dict[str, bytes] = {}
        self.fail_with = fail_with

    async def save(self, key: str, content: bytes) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.blobs[key] = content

    async def load(self, key: str) -> bytes:
        if key not in self.blobs:
            raise StorageNotFoundError(key)
        return self.blobs[key]

    async def delete(self, key: str) -> None:
        if key not in self.blobs:
            raise StorageNotFoundError(key)
        del self.blobs[key]

    async def exists(self, key: str) -> bool:
        return key in self.blobs


def _service(storage=None, repo=None):
    storage = storage or InMemoryStorage()
    repo = repo or InMemoryFileRecordRepo()
    return FileService(storage, repo, clock=lambda: 1700000000000), storage, repo


class TestSanitizeFilename:
    """Tests for _sanitize_filename."""

    def test_basename_only(self) -> None:
        assert _sanitize_filename("report.pdf") == "report.pdf"

    def test_posix_path_stripped(self) -> None:
        assert _sanitize_filename("/foo/bar/report.pdf") == "report.pdf"

    def test_windows_path_stripped(self) -> None:
        assert _sanitize_filename("C:\\Users\\me\\report.pdf") == "report.pdf"

    def test_null_removed(self) -> None:
        assert _sanitize_filename("a\x00b.pdf") == "ab.pdf"

    def test_leading_dots_and_spaces_stripped(self) -> None:
        assert _sanitize_filename(" ..hidden ") == "hidden"

    @pytest.mark.parametrize("name", ["", "..", "a/", "  "])
    def test_empty_after_sanitize_raises(self, name: str) -> None:
        with pytest.raises(ValidationException, match="empty or invalid"):
            _sanitize_filename(name)


def test_generate_stored_name_prefixes_millis() -> None:
    assert generate_stored_name("a.txt", 1718000000000) == "1718000000000_a.txt"
    assert generate_stored_name("../x/a.txt", 5) == "5_a.txt"


@pytest.mark.asyncio
async def test_save_then_load_returns_same_bytes_and_metadata() -> None:
    svc, storage, _ = _service()
    record = await svc.save("a.txt", "text/plain", 5, b"hello")
    assert record.stored_name == "1700000000000_a.txt"
    assert storage.blobs[record.stored_name] == b"hello"

    view = await svc.load(record.id)
    assert view.content == b"hello"
    assert view.name == "a.txt"
    assert view.content_type == "text/plain"
    assert view.size == 5


@pytest.mark.asyncio
async def test_load_unknown_id_raises_not_found() -> None:
    svc, _, _ = _service()
    with pytest.raises(FileNotFoundException):
        await svc.load(99999)


@pytest.mark.asyncio
async def test_delete_then_load_raises_not_found() -> None:
    svc, storage, repo = _service()
    record = await svc.save("a.txt", "text/plain", 5, b"hello")
    await svc.delete(record.id)
    assert storage.blobs == {}
    assert repo.rows == {}
    with pytest.raises(FileNotFoundException):
        await svc.load(record.id)
    with pytest.raises(FileNotFoundException):
        await svc.delete(record.id)


@pytest.mark.asyncio
async def test_local_write_failure_raises_save_exception_and_keeps_record() -> None:
    storage = InMemoryStorage(fail_with=StorageIOError("k", "save", "disk full"))
    svc, _, repo = _service(storage=storage)
    with pytest.raises(FileSaveException) as exc_info:
        await svc.save("a.txt", "text/plain", 5, b"hello")
    assert isinstance(exc_info.value.__cause__, StorageIOError)
    orphan_id = exc_info.value.details["file_id"]
    assert orphan_id in repo.rows


@pytest.mark.asyncio
async def test_remote_write_failure_propagates_and_keeps_record() -> None:
    storage = InMemoryStorage(fail_with=StorageServiceError("k", "save", "denied"))
    svc, _, repo = _service(storage=storage)
    with pytest.raises(StorageServiceError):
        await svc.save("a.txt", "text/plain", 5, b"hello")
    assert len(repo.rows) == 1


@pytest.mark.asyncio
async def test_invalid_name_creates_no_record() -> None:
    svc, _, repo = _service()
    with pytest.raises(ValidationException):
        await svc.save("..", "text/plain", 1, b"x")
    assert repo.rows == {}


@pytest.mark.asyncio
async def test_blob_delete_failure_keeps_record() -> None:
    svc, storage, repo = _service()
    record = await svc.save("a.txt", "text/plain", 5, b"hello")
    storage.blobs.clear()
    with pytest.raises(StorageNotFoundError):
        await svc.delete(record.id)
    assert record.id in repo.rows
