"""Shared error taxonomy for ms-menu."""

from __future__ import annotations

from typing import Any, Mapping


def _normalize_context_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_normalize_context_value(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {key: _normalize_context_value(val) for key, val in context.items()}


class MSError(Exception):
    """Base error type for typed failure handling."""

    exit_code = 1

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__


class UsageError(MSError):
    """Invalid call: empty option set, mismatched labels/values, bad argument."""


class TerminalReadError(MSError):
    """The terminal closed or could not be read during the input loop."""


class ConfigurationError(MSError):
    """Failure due to invalid configuration."""


def error_to_payload(error: MSError) -> dict[str, Any]:
    """Convert an MSError to a result payload."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }
