"""Custom exception classes for Hospital Records.

All exceptions inherit from HospitalRecordsError to allow catching all custom exceptions.
"""

from pathlib import Path
from typing import Optional


class HospitalRecordsError(Exception):
    """Base exception for all Hospital Records custom exceptions."""

    pass


class ValidationError(HospitalRecordsError):
    """Raised when a field value is rejected.
    
    Examples:
        - Negative stock count or alert threshold
        - Menu choice outside the known variants
    """

    pass


class ConfigurationError(HospitalRecordsError):
    """Raised when configuration loading or validation fails.
    
    Examples:
        - Invalid configuration file format
        - Unknown corrupt-store policy
    """

    pass


class RecordNotFoundError(HospitalRecordsError):
    """Raised when a lookup by identifier finds no record.
    
    Attributes:
        entity: Human readable entity name ("patient", "invoice", ...)
        record_id: Identifier that was looked up
    """

    def __init__(self, entity: str, record_id: int) -> None:
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity.capitalize()} {record_id} not found")


class StoreError(HospitalRecordsError):
    """Base exception for persisted document errors.
    
    Attributes:
        path: Path of the persisted document
        reason: Underlying failure description
    """

    def __init__(self, message: str, path: Path, reason: Optional[str] = None) -> None:
        self.path = path
        self.reason = reason
        super().__init__(message)


class CorruptStoreError(StoreError):
    """Raised when the persisted document exists but cannot be parsed.
    
    Examples:
        - Truncated or hand-edited JSON
        - Unknown status/role tag
        - Missing collection keys
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(
            f"Data file {path} is unreadable or malformed: {reason}",
            path=path,
            reason=reason,
        )


class PersistenceWriteError(StoreError):
    """Raised when the persisted document cannot be written.
    
    The in-memory change that triggered the save is kept; callers should tell
    the operator the change may not have been saved.
    
    Examples:
        - Disk full
        - Permission denied on the data directory
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(
            f"Failed to write data file {path}: {reason}. "
            f"Changes may not have been saved.",
            path=path,
            reason=reason,
        )
