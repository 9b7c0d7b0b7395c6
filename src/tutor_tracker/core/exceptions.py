from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ScheduleConflictError(ValidationError):
    """Raised when a proposed class overlaps an existing one on the same day."""

    def __init__(self, message: str, conflict_with: Optional[Any] = None):
        super().__init__(message)
        self.conflict_with = conflict_with


class AlreadyMarkedError(ValidationError):
    """Raised when attendance already exists for a student on a date."""


class NotFoundError(ValidationError):
    """Raised when a record addressed by id does not exist."""


class AuthenticationError(DomainError):
    """Raised when credentials are invalid or no session is present."""


class StoreError(DomainError):
    """Raised when the data store reports a failure for an operation."""
