"""Error hierarchy for configaccess."""

from __future__ import annotations

from typing import Any

__all__ = [
    "ConfigAccessError",
    "SourceError",
    "InvalidLocatorError",
    "UnsupportedFormatError",
    "ParseError",
    "SourceNotFoundError",
    "UnsupportedOperationError",
    "PathConflictError",
    "InvalidInputError",
    "ConfigError",
    "ErrorCodes",
]


class ConfigAccessError(Exception):
    """Base error for all configaccess errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class SourceError(ConfigAccessError):
    """Base for failures while loading a configuration source."""


class InvalidLocatorError(SourceError):
    """Raised when a source locator is empty or malformed."""

    def __init__(self, locator: str, reason: str = "empty locator", **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_LOCATOR",
            message=f"Invalid locator '{locator}': {reason}",
            details={"locator": locator, "reason": reason},
            **kwargs,
        )

    @property
    def locator(self) -> str:
        """The rejected locator string."""
        return self.details["locator"]


class UnsupportedFormatError(SourceError):
    """Raised when no registered loader or scheme matches a locator."""

    def __init__(self, locator: str, supported: list[str] | None = None, **kwargs: Any) -> None:
        supported = supported or []
        message = f"No loader registered for '{locator}'"
        if supported:
            message += f". Supported: {', '.join(supported)}"
        super().__init__(
            code="UNSUPPORTED_FORMAT",
            message=message,
            details={"locator": locator, "supported": supported},
            **kwargs,
        )

    @property
    def locator(self) -> str:
        """The locator no loader matched."""
        return self.details["locator"]


class ParseError(SourceError):
    """Raised when a recognized format fails to parse.

    Carries the source identifier and, when the parser reports one, the
    1-based line number of the offending input.
    """

    def __init__(self, source: str, reason: str, line: int | None = None, **kwargs: Any) -> None:
        if line:
            message = f"{reason} in {source} line {line}"
        else:
            message = f"{reason} {source}"
        super().__init__(
            code="PARSE_ERROR",
            message=message,
            details={"source": source, "line": line or None, "reason": reason},
            **kwargs,
        )

    @property
    def source(self) -> str:
        return self.details["source"]

    @property
    def line(self) -> int | None:
        return self.details["line"]

    @property
    def reason(self) -> str:
        return self.details["reason"]


class SourceNotFoundError(SourceError):
    """Raised when a configuration source cannot be opened."""

    def __init__(self, source: str, reason: str = "not found", **kwargs: Any) -> None:
        super().__init__(
            code="SOURCE_NOT_FOUND",
            message=f"Cannot read configuration source {source}: {reason}",
            details={"source": source, "reason": reason},
            **kwargs,
        )

    @property
    def source(self) -> str:
        return self.details["source"]


class UnsupportedOperationError(ConfigAccessError):
    """Raised when a write is attempted on a read-only backend."""

    def __init__(self, backend: str, operation: str = "put_string", **kwargs: Any) -> None:
        super().__init__(
            code="UNSUPPORTED_OPERATION",
            message=f"{backend} does not support {operation}",
            details={"backend": backend, "operation": operation},
            **kwargs,
        )


class PathConflictError(ConfigAccessError):
    """Raised when a write would turn a leaf into a subtree or vice versa."""

    def __init__(self, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="PATH_CONFLICT",
            message=f"Cannot write '{path}': {reason}",
            details={"path": path, "reason": reason},
            **kwargs,
        )

    @property
    def path(self) -> str:
        return self.details["path"]


class InvalidInputError(ConfigAccessError):
    """Raised for invalid arguments."""

    def __init__(self, message: str = "Invalid input", **kwargs: Any) -> None:
        super().__init__(code="GENERAL_INVALID_INPUT", message=message, **kwargs)


class ConfigError(ConfigAccessError):
    """Raised when a present value cannot be converted to the requested type."""

    def __init__(self, key: str, expected: str, value: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_INVALID",
            message=f"Value of '{key}' is not a valid {expected}: {value!r}",
            details={"key": key, "expected": expected, "value": value},
            **kwargs,
        )

    @property
    def key(self) -> str:
        return self.details["key"]


class ErrorCodes:
    """All configaccess error codes as constants.

    Example:
        if error.code == ErrorCodes.UNSUPPORTED_FORMAT:
            fall_back_to_defaults()
    """

    INVALID_LOCATOR = "INVALID_LOCATOR"
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    PARSE_ERROR = "PARSE_ERROR"
    SOURCE_NOT_FOUND = "SOURCE_NOT_FOUND"
    UNSUPPORTED_OPERATION = "UNSUPPORTED_OPERATION"
    PATH_CONFLICT = "PATH_CONFLICT"
    CONFIG_INVALID = "CONFIG_INVALID"
    GENERAL_INVALID_INPUT = "GENERAL_INVALID_INPUT"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
