"""Shared error taxonomy for the cumulus selector."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar


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


class CumulusError(Exception):
    """Base error type for typed failure handling."""

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

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": str(self), "context": self.context}


class SelectorError(CumulusError):
    """Failure of an interactive selection session."""


class EmptyInputError(SelectorError):
    """No candidate items were supplied; raised before the terminal is touched."""


class TerminalUnavailableError(SelectorError):
    """The terminal could not be switched to raw/alternate-screen mode."""


class SchemaError(CumulusError):
    """A resource schema is not usable by the selector."""


class ConfigurationError(CumulusError):
    """Failure due to invalid configuration."""


T = TypeVar("T", bound=CumulusError)


def wrap_error(
    error_cls: type[T],
    message: str,
    *,
    context: Mapping[str, Any] | None = None,
    cause: Exception | None = None,
) -> T:
    """Create a typed CumulusError with optional context and cause."""
    return error_cls(message, context=context, cause=cause)
