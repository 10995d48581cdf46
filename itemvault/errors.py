"""Repository-level exceptions."""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Closed set of error kinds raised by repositories and readers."""
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    INVALID_VALUE = "invalid_value"
    MALFORMED_RECORD = "malformed_record"


class RepositoryError(Exception):
    """Base exception for repository operations."""

    kind: ErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DuplicateKeyError(RepositoryError):
    """Raised when adding an item whose id is already stored."""

    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, entity_type: str, key: int):
        self.entity_type = entity_type
        self.key = key
        super().__init__(f"{entity_type} with ID {key} already exists.")


class NotFoundError(RepositoryError):
    """Raised when a requested item does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity_type: str, key: int):
        self.entity_type = entity_type
        self.key = key
        super().__init__(f"{entity_type} with ID {key} not found.")


class InvalidValueError(RepositoryError):
    """Raised when a field update violates a simple field check."""

    kind = ErrorKind.INVALID_VALUE

    def __init__(self, field: str, value: Any, reason: Optional[str] = None):
        self.field = field
        self.value = value
        super().__init__(reason or f"Invalid value for {field}: {value!r}")


class MalformedRecordError(RepositoryError):
    """Raised when a line of flat-file input cannot be parsed.

    Carries the 1-based line number so the caller can point at the bad line.
    """

    kind = ErrorKind.MALFORMED_RECORD

    def __init__(self, line_number: int, detail: str):
        self.line_number = line_number
        self.detail = detail
        super().__init__(f"Line {line_number}: {detail}")
