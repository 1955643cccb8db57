"""Custom exception hierarchy for litecrud.

All public errors inherit from LiteCrudError so callers can catch the base
class for any litecrud-specific failure.

Driver operations do not raise these errors; they return them inside a
:class:`~litecrud.drivers.base.QueryResult`.  Raising paths are limited to
``Database`` construction, ``QueryResult.unwrap()`` and the
``transaction()`` context manager.
"""
from __future__ import annotations

from typing import Any


class LiteCrudError(Exception):
    """Base exception for all litecrud errors."""


class ConfigurationError(LiteCrudError):
    """Raised for bad or missing connection parameters or an unknown driver.

    Args:
        message: Human-readable description.
        key: The configuration key at fault, when there is one.
    """

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class DatabaseConnectionError(LiteCrudError):
    """Raised when the engine cannot open or create the target store.

    Args:
        message: Human-readable description.
        location: The store location that failed to open.
    """

    def __init__(self, message: str, location: str | None = None) -> None:
        super().__init__(message)
        self.location = location


class NotConnectedError(LiteCrudError):
    """Raised when an operation runs before connect or after disconnect."""

    def __init__(self, message: str = "Not connected to database") -> None:
        super().__init__(message)


class EngineExecutionError(LiteCrudError):
    """Wraps any failure reported by the embedded engine.

    The original engine exception is chained as ``__cause__``.

    Args:
        message: The engine's error message.
        sql: The statement that failed.
        params: Number of bound parameters (values are not retained).
    """

    def __init__(
        self,
        message: str,
        sql: str | None = None,
        params: int = 0,
    ) -> None:
        super().__init__(message)
        self.sql = sql
        self.params = params


class TransactionStateError(LiteCrudError):
    """Raised on transaction misuse (double commit, nested begin, ...)."""


class ValidationError(LiteCrudError):
    """Raised when caller input fails structural validation before compilation.

    Args:
        message: Human-readable description.
        code: Machine-readable error code (e.g. ``INVALID_CONDITION``).
        details: Extra context about the offending input.
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details: dict[str, Any] = details or {}

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response."""
        return {
            "error": self.code,
            "message": str(self),
            "details": self.details,
        }


class SchemaError(ValidationError):
    """Raised when a table schema is malformed (e.g. duplicate columns)."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code="SCHEMA_ERROR", details=details or {})


class ConditionError(ValidationError):
    """Raised when a condition map or SET map cannot be compiled.

    Args:
        message: Human-readable description.
        field: The field whose condition is invalid.
        operators: The operator keys found on that field, if any.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        operators: list[str] | None = None,
    ) -> None:
        super().__init__(
            message,
            code="INVALID_CONDITION",
            details={"field": field, "operators": operators or []},
        )
