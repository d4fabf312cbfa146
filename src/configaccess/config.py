"""Typed configuration access on top of a backend."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from configaccess.backends import Backend, MemoryBackend, open_backend
from configaccess.errors import ConfigError, InvalidInputError
from configaccess.path import DEFAULT_SEPARATOR

__all__ = ["Config"]

T = TypeVar("T")

_ADAPTERS: dict[type, TypeAdapter[Any]] = {
    int: TypeAdapter(int),
    float: TypeAdapter(float),
    bool: TypeAdapter(bool),
}


class Config:
    """Configuration accessor with dot-path key support.

    Wraps any Backend. A plain dict is wrapped in a MemoryBackend, so
    ``Config({"db": {"port": "5432"}}).get_int("db.port")`` returns 5432.
    Missing keys return the supplied default; values that are present but
    not convertible raise ConfigError.
    """

    def __init__(self, data: dict[str, Any] | None = None, backend: Backend | None = None) -> None:
        if data is not None and backend is not None:
            raise InvalidInputError(message="Pass either data or backend, not both")
        self._backend: Backend = backend if backend is not None else MemoryBackend(data or {})

    @classmethod
    def from_locator(cls, locator: str, separator: str = DEFAULT_SEPARATOR) -> Config:
        """Open the backend for locator and wrap it."""
        return cls(backend=open_backend(locator, separator=separator))

    @property
    def backend(self) -> Backend:
        return self._backend

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get a configuration value by dot-path key."""
        value = self._backend.get_string(key)
        return default if value is None else value

    def get_string(self, key: str, default: str | None = None) -> str | None:
        return self.get(key, default)

    def get_int(self, key: str, default: int | None = None) -> int | None:
        return self._get_typed(key, int, default)

    def get_float(self, key: str, default: float | None = None) -> float | None:
        return self._get_typed(key, float, default)

    def get_bool(self, key: str, default: bool | None = None) -> bool | None:
        """Get a boolean; accepts true/false, yes/no, on/off, 1/0 (any case)."""
        return self._get_typed(key, bool, default)

    def as_dict(self, prefix: str = "") -> dict[str, str]:
        """Return every value under prefix keyed by its full path."""
        result: dict[str, str] = {}
        for path in self._backend.keys(prefix):
            value = self._backend.get_string(path)
            if value is not None:
                result[path] = value
        return result

    def _get_typed(self, key: str, target: type[T], default: T | None) -> T | None:
        raw = self._backend.get_string(key)
        if raw is None:
            return default
        try:
            return _ADAPTERS[target].validate_python(raw.strip())
        except ValidationError as e:
            raise ConfigError(key, expected=target.__name__, value=raw, cause=e) from e
