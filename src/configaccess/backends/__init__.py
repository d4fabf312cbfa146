"""Configuration backends and scheme-based backend selection.

Usage::

    from configaccess.backends import open_backend

    backend = open_backend("file:/etc/app/example.cfg")
    port = backend.get_string("server.port")
"""

from __future__ import annotations

from configaccess.backends.base import Backend
from configaccess.backends.file import FileBackend, load_file_tree
from configaccess.backends.memory import DEFAULT_MEMORY_LOCATOR, MemoryBackend
from configaccess.errors import UnsupportedFormatError
from configaccess.formats import FormatRegistry
from configaccess.locator import FILE_SCHEME, MEMORY_SCHEME, parse_locator
from configaccess.path import DEFAULT_SEPARATOR

__all__ = [
    "Backend",
    "DEFAULT_MEMORY_LOCATOR",
    "FileBackend",
    "MemoryBackend",
    "SCHEMES",
    "load_file_tree",
    "open_backend",
]

SCHEMES = (FILE_SCHEME, MEMORY_SCHEME)


def open_backend(
    locator: str,
    separator: str = DEFAULT_SEPARATOR,
    encoding: str = "utf-8",
    formats: FormatRegistry | None = None,
) -> Backend:
    """Construct and load the backend matching the locator's scheme.

    Raises:
        InvalidLocatorError: If locator is empty or malformed.
        UnsupportedFormatError: If the scheme or file suffix is not supported.
        SourceNotFoundError, ParseError: If the source cannot be loaded.
    """
    scheme = parse_locator(locator).scheme
    if scheme == FILE_SCHEME:
        return FileBackend(locator, separator=separator, encoding=encoding, formats=formats)
    if scheme == MEMORY_SCHEME:
        return MemoryBackend(locator=locator, separator=separator, encoding=encoding, formats=formats)
    raise UnsupportedFormatError(locator, supported=[f"{s}:" for s in SCHEMES])
