"""Shared error taxonomy for cellfmt."""

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
    return {str(key): _normalize_context_value(val) for key, val in context.items()}


class CFError(Exception):
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


class SelectionError(CFError):
    """Unresolvable column/row reference or failing row predicate."""


class FormatConfigError(CFError):
    """Conflicting or unrecognized formatter options."""


class ParseError(CFError):
    """A raw value does not match the textual form a formatter requires."""


class ReferenceLookupError(CFError, LookupError):
    """Unknown locale, currency, style or palette code."""


class RenderError(CFError):
    """One or more cells failed during a render pass."""

    def __init__(
        self,
        message: str,
        *,
        errors: list[CFError] | None = None,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context=context, cause=cause)
        self.errors = list(errors or [])

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["errors"] = [error.to_dict() for error in self.errors]
        return payload


T = TypeVar("T", bound=CFError)


def wrap_error(
    error_cls: type[T],
    message: str,
    *,
    context: Mapping[str, Any] | None = None,
    cause: Exception | None = None,
) -> T:
    """Create a typed CFError with optional context and cause."""
    return error_cls(message, context=context, cause=cause)


def error_to_payload(error: CFError) -> dict[str, Any]:
    """Convert a CFError to a flat report payload."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }
