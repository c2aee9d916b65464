"""Domain exceptions for the Filekeeper application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class FilekeeperException(Exception):
    """Base exception for all Filekeeper application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the API."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(FilekeeperException):
    """Raised when input validation fails (e.g. empty or unusable filename)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(FilekeeperException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str | int) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'file').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class FileNotFoundException(ResourceNotFoundException):
    """Raised when no file record exists for the requested id."""

    def __init__(self, file_id: int) -> None:
        super().__init__("file", file_id)


class FileSaveException(FilekeeperException):
    """Raised when the bytes of an upload could not be written to storage.

    The metadata record created before the write is kept; its id is carried
    in details so the orphan can be found.
    """

    def __init__(self, file_id: int, stored_name: str, reason: str) -> None:
        super().__init__(
            "Failed to save file due to IO issues",
            "FILE_SAVE_ERROR",
            {"file_id": file_id, "stored_name": stored_name, "reason": reason},
        )


class SqlNotConfiguredException(FilekeeperException):
    """Raised when an operation requires the metadata database but none is configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
