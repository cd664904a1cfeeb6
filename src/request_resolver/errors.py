"""Errors raised while building and resolving requests."""

from __future__ import annotations

from typing import Any, Optional


class RequestResolutionError(Exception):
    pass


class InvalidArgumentError(RequestResolutionError, ValueError):
    """Raised when a required builder argument is missing or unusable."""

    def __init__(self, argument: str, reason: str = "must not be None") -> None:
        self.argument = argument
        super().__init__(f"Argument '{argument}' {reason}")


class MissingOrMistypedParameterError(RequestResolutionError, LookupError):
    """Raised when a query string value cannot be read back as the requested type."""

    def __init__(self, name: str, expected: Any, value: Any = None) -> None:
        self.name = name
        self.expected = expected
        self.value = value
        type_name = getattr(expected, "__name__", repr(expected))
        super().__init__(f"Query string parameter '{name}'={value!r} is not a valid {type_name}")


class RequestValidationError(RequestResolutionError):
    """Raised when a fully assembled request path is inconsistent."""

    def __init__(self, message: str, path: Optional[Any] = None) -> None:
        self.path = path
        super().__init__(message)
