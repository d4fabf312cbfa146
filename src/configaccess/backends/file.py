"""File backend: read-only access to a configuration file.

Accepted locators:
    file:/configDir/example.cfg
    /configDir/example.cfg          (no scheme means file:)

The suffix selects the format (see ``configaccess.formats``), e.g.
``.ini`` and ``.cfg`` for INI files.
"""

from __future__ import annotations

import logging
from pathlib import Path

from configaccess.backends.store import TreeStore
from configaccess.errors import ParseError, SourceNotFoundError, UnsupportedFormatError, UnsupportedOperationError
from configaccess.formats import FormatRegistry, default_formats
from configaccess.locator import FILE_SCHEME, Locator, parse_locator
from configaccess.path import DEFAULT_SEPARATOR, PathResolver
from configaccess.tree import ConfigTree, count_leaves

__all__ = ["FileBackend", "load_file_tree"]

logger = logging.getLogger(__name__)


def load_file_tree(locator: Locator, formats: FormatRegistry, encoding: str = "utf-8") -> ConfigTree:
    """Read and parse the file a ``file:`` locator points at.

    The format is chosen before the file is opened, so an unknown suffix is
    reported as such even when the file does not exist.

    Raises:
        UnsupportedFormatError: If the scheme is not ``file`` or no loader
            matches the suffix.
        SourceNotFoundError: If the file cannot be read.
        ParseError: If the content cannot be decoded or parsed.
    """
    if locator.scheme != FILE_SCHEME:
        raise UnsupportedFormatError(locator.raw, supported=[f"{FILE_SCHEME}:"])

    suffix, loader = formats.select(locator.path)
    file_path = Path(locator.path)
    try:
        text = file_path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise ParseError(locator.path, f"cannot decode as {encoding}", cause=e) from e
    except OSError as e:
        raise SourceNotFoundError(locator.path, reason=e.strerror or str(e), cause=e) from e

    tree = loader(text, locator.path)
    logger.debug("Loaded %s as %s (%d values)", locator.path, suffix, count_leaves(tree))
    return tree


class FileBackend:
    """Read-only backend over a file in one of the registered formats.

    The file is loaded in the constructor; an invalid locator, unknown
    suffix, unreadable file or parse failure raises immediately.
    """

    def __init__(
        self,
        locator: str,
        separator: str = DEFAULT_SEPARATOR,
        encoding: str = "utf-8",
        formats: FormatRegistry | None = None,
    ) -> None:
        resolver = PathResolver(separator)
        self._formats = formats if formats is not None else default_formats()
        self._encoding = encoding
        parsed = parse_locator(locator)
        tree = load_file_tree(parsed, self._formats, self._encoding)
        self._store = TreeStore(resolver, parsed, tree)

    def __repr__(self) -> str:
        return f"FileBackend({self.locator!r})"

    @property
    def locator(self) -> str:
        return self._store.locator.raw

    @property
    def separator(self) -> str:
        return self._store.resolver.separator

    def get_string(self, path: str) -> str | None:
        return self._store.get_string(path)

    def has(self, path: str) -> bool:
        return self.get_string(path) is not None

    def keys(self, prefix: str = "") -> list[str]:
        return self._store.keys(prefix)

    def put_string(self, path: str, value: str) -> None:
        raise UnsupportedOperationError("FileBackend", operation="put_string")

    def set_prefix(self, locator: str) -> None:
        """Load locator and switch to it.

        On failure the error propagates and the previous source stays
        loaded and queryable.
        """
        try:
            parsed = parse_locator(locator)
            tree = load_file_tree(parsed, self._formats, self._encoding)
        except Exception as e:
            logger.warning("Failed to load '%s', keeping '%s': %s", locator, self.locator, e)
            raise
        self._store.replace(parsed, tree)

    def reload(self) -> None:
        self.set_prefix(self.locator)
