from __future__ import annotations

from typing import Any, Mapping, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, message: str, *, field_errors: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.field_errors = dict(field_errors or {})


class ApiError(DomainError):
    """Raised when the HRMS backend cannot be reached or rejects a request."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        field_errors: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.field_errors = dict(field_errors or {})
