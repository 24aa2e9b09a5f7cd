"""Custom exceptions for fastapi-header-binding.

All exceptions derive from :class:`HeaderBindingError` so callers can catch
the entire family with a single ``except HeaderBindingError`` clause.

Hierarchy::

    HeaderBindingError
    ├── ConfigurationError
    │   └── UnsupportedHeaderTypeError
    ├── MissingHeaderError
    └── ArgumentResolutionError
"""

from __future__ import annotations

from typing import Any

from starlette import status


class HeaderBindingError(Exception):
    """Base exception for all fastapi-header-binding errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details: dict[str, Any] = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | details={self.details}"
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r})"


class ConfigurationError(HeaderBindingError):
    """Raised when a parameter or binding is declared with an invalid value.

    This is a programmer error: it is raised at declaration time where
    possible and is never translated into an HTTP response.
    """

    def __init__(
        self,
        parameter: str,
        reason: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(f"Invalid configuration for {parameter!r}: {reason}", details)
        self.parameter = parameter
        self.reason = reason


class UnsupportedHeaderTypeError(ConfigurationError):
    """Raised when a header-bound parameter has a type the resolver cannot produce."""

    def __init__(
        self,
        parameter: str,
        declared_type: str,
        supported: list[str],
        details: dict[str, Any] | None = None,
    ) -> None:
        *head, last = [f'"{name}"' for name in supported]
        reason = (
            f'Could not resolve the argument typed "{declared_type}". '
            f"Valid values types are {', '.join(head)} or {last}."
        )
        super().__init__(parameter, reason, details)
        self.declared_type = declared_type
        self.supported = supported


class MissingHeaderError(HeaderBindingError):
    """Raised when a required header is absent and no default is available.

    ``status_code`` is the failure status configured on the binding; the
    HTTP layer uses it to build the response.
    """

    def __init__(
        self,
        header_name: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(f'Missing header "{header_name}".', details)
        self.header_name = header_name
        self.status_code = status_code


class ArgumentResolutionError(HeaderBindingError, RuntimeError):
    """Raised by the argument pipeline when a parameter cannot be resolved."""

    def __init__(
        self,
        parameter: str,
        reason: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(f"Could not resolve argument {parameter!r}: {reason}", details)
        self.parameter = parameter
        self.reason = reason


__all__ = [
    "ArgumentResolutionError",
    "ConfigurationError",
    "HeaderBindingError",
    "MissingHeaderError",
    "UnsupportedHeaderTypeError",
]
