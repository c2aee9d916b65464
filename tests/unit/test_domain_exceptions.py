"""Unit tests for domain and storage exceptions and their HTTP mapping."""

import pytest

from filekeeper.core.exception_handlers import status_for_error_code
from filekeeper.domain.exceptions import (
    FileNotFoundException,
    FileSaveException,
    FilekeeperException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)
from filekeeper.infrastructure.exceptions import (
    StorageClientError,
    StorageException,
    StorageIOError,
    StorageNotFoundError,
    StoragePermissionError,
    StorageServiceError,
)


def test_base_exception_defaults_error_code_to_class_name() -> None:
    exc = FilekeeperException("boom")
    assert exc.error_code == "FilekeeperException"
    assert exc.details == {}
    assert exc.to_dict() == {
        "error": "FilekeeperException",
        "message": "boom",
        "details": {},
    }


def test_file_not_found_is_resource_not_found() -> None:
    exc = FileNotFoundException(7)
    assert isinstance(exc, ResourceNotFoundException)
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "file", "resource_id": 7}
    assert str(exc) == "file not found: 7"


def test_file_save_exception_carries_orphan_id() -> None:
    exc = FileSaveException(3, "1_a.txt", "disk full")
    assert exc.message == "Failed to save file due to IO issues"
    assert exc.details == {"file_id": 3, "stored_name": "1_a.txt", "reason": "disk full"}


def test_validation_exception_field_in_details() -> None:
    assert ValidationException("bad", field="file").details == {"field": "file"}
    assert ValidationException("bad").details == {}


@pytest.mark.parametrize(
    "exc",
    [
        StorageNotFoundError("k"),
        StorageIOError("k", "save", "r"),
        StorageServiceError("k", "save", "r"),
        StorageClientError("k", "save", "r"),
        StoragePermissionError("k", "save"),
    ],
)
def test_storage_errors_share_base(exc: StorageException) -> None:
    assert isinstance(exc, FilekeeperException)
    assert exc.details["key"] == "k"


@pytest.mark.parametrize(
    ("exc", "status"),
    [
        (FileNotFoundException(1), 404),
        (ValidationException("bad"), 400),
        (FileSaveException(1, "k", "r"), 422),
        (StorageNotFoundError("k"), 500),
        (StorageIOError("k", "load", "r"), 500),
        (StorageServiceError("k", "load", "r"), 500),
        (StorageClientError("k", "load", "r"), 503),
        (SqlNotConfiguredException(), 503),
        (FilekeeperException("x"), 500),
    ],
)
def test_status_for_error_code(exc: FilekeeperException, status: int) -> None:
    assert status_for_error_code(exc.error_code) == status
