"""Rollcall exception hierarchy."""

from __future__ import annotations


class RollcallError(Exception):
    """Base exception for all Rollcall errors."""


class EmployeeValidationError(RollcallError):
    """An employee mutation violates an identity invariant."""


class MissingIDError(EmployeeValidationError):
    """Employee ID is empty."""

    def __init__(self) -> None:
        super().__init__("Employee ID is required")


class DuplicateIDError(EmployeeValidationError):
    """Employee ID already exists (compared case/whitespace-insensitively)."""

    def __init__(self, employee_id: str) -> None:
        self.employee_id = employee_id
        super().__init__(f"Employee ID already exists: {employee_id}")


class EmployeeNotFoundError(RollcallError):
    """No employee matches the given ID."""

    def __init__(self, employee_id: str) -> None:
        self.employee_id = employee_id
        super().__init__(f"Employee {employee_id} not found")


class StoreError(RollcallError):
    """Record store operation failed."""


class StoreCorruptedError(StoreError):
    """A cached document does not match its collection schema."""

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(f"Cached document {key!r} is invalid: {message}")


class MirrorError(StoreError):
    """Remote mirror operation failed."""


class ArchiveError(StoreError):
    """Export archive read/write failed."""


class ImportPipelineError(RollcallError):
    """A CSV import cannot start (empty file, bad scope)."""
