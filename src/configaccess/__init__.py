"""configaccess - Hierarchical configuration access over pluggable backends."""

from __future__ import annotations

# Backends
from configaccess.backends import Backend, FileBackend, MemoryBackend, open_backend

# Config
from configaccess.config import Config

# Formats
from configaccess.formats import FormatRegistry, default_formats

# Paths and locators
from configaccess.locator import Locator, parse_locator
from configaccess.path import DEFAULT_SEPARATOR, PathResolver
from configaccess.tree import ConfigTree

# Errors
from configaccess.errors import (
    ConfigAccessError,
    ConfigError,
    ErrorCodes,
    InvalidInputError,
    InvalidLocatorError,
    ParseError,
    PathConflictError,
    SourceError,
    SourceNotFoundError,
    UnsupportedFormatError,
    UnsupportedOperationError,
)

__version__ = "0.1.0"

__all__ = [
    # Backends
    "Backend",
    "FileBackend",
    "MemoryBackend",
    "open_backend",
    # Config
    "Config",
    # Formats
    "FormatRegistry",
    "default_formats",
    # Paths and locators
    "ConfigTree",
    "DEFAULT_SEPARATOR",
    "Locator",
    "PathResolver",
    "parse_locator",
    # Errors
    "ErrorCodes",
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
]
