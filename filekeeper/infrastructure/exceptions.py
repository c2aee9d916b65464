"""Infrastructure exceptions for storage operations.

Storage errors extend FilekeeperException so presentation can map them
to HTTP responses consistently. Every backend raises these and nothing
else; the originating exception is chained as __cause__.
"""

from filekeeper.domain.exceptions import FilekeeperException


class StorageException(FilekeeperException):
    """Base exception for storage operations."""


class StorageNotFoundError(StorageException):
    """No blob stored under the key."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f"File not found in storage: {key}",
            "STORAGE_NOT_FOUND",
            {"key": key},
        )


class StorageIOError(StorageException):
    """Local medium read, write, or delete failed."""

    def __init__(self, key: str, operation: str, reason: str) -> None:
        super().__init__(
            f"IO error: unable to {operation} file: {key}",
            "STORAGE_IO_ERROR",
            {"key": key, "operation": operation, "reason": reason},
        )


class StorageServiceError(StorageException):
    """Remote object store received the request and rejected it."""

    def __init__(self, key: str, operation: str, reason: str) -> None:
        super().__init__(
            f"Service error: unable to {operation} file: {key}",
            "STORAGE_SERVICE_ERROR",
            {"key": key, "operation": operation, "reason": reason},
        )


class StorageClientError(StorageException):
    """Remote object store could not be reached."""

    def __init__(self, key: str, operation: str, reason: str) -> None:
        super().__init__(
            f"Client error: unable to connect to storage to {operation} file: {key}",
            "STORAGE_CLIENT_ERROR",
            {"key": key, "operation": operation, "reason": reason},
        )


class StoragePermissionError(StorageException):
    """Key resolves outside the storage root (path traversal)."""

    def __init__(self, key: str, operation: str) -> None:
        super().__init__(
            f"Permission denied for {operation} on {key}",
            "STORAGE_PERMISSION_ERROR",
            {"key": key, "operation": operation},
        )
