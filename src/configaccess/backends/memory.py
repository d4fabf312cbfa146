"""In-memory backend backed by a nested dict.

Structure: nested dicts are sections, str values are values.

Example:
    MemoryBackend({
        "db": {
            "host": "localhost",
            "port": "5432",
        }
    })
"""

from __future__ import annotations

import logging
from typing import Any

from configaccess.backends.file import load_file_tree
from configaccess.backends.store import TreeStore
from configaccess.errors import InvalidInputError, PathConflictError, UnsupportedFormatError
from configaccess.formats import FormatRegistry, default_formats
from configaccess.locator import FILE_SCHEME, MEMORY_SCHEME, Locator, parse_locator
from configaccess.path import DEFAULT_SEPARATOR, PathResolver
from configaccess.tree import ConfigTree, copy_tree

__all__ = ["MemoryBackend", "DEFAULT_MEMORY_LOCATOR"]

logger = logging.getLogger(__name__)

DEFAULT_MEMORY_LOCATOR = "memory:default"


class MemoryBackend:
    """Writable backend holding its tree in process memory.

    ``set_prefix("memory:<name>")`` starts over with an empty tree;
    ``set_prefix("file:...")`` seeds the tree from a file, after which
    writes only change the in-memory copy.
    """

    def __init__(
        self,
        tree: dict[str, Any] | None = None,
        *,
        locator: str | None = None,
        separator: str = DEFAULT_SEPARATOR,
        encoding: str = "utf-8",
        formats: FormatRegistry | None = None,
    ) -> None:
        if tree is not None and locator is not None:
            raise InvalidInputError(message="Pass either an initial tree or a locator, not both")
        resolver = PathResolver(separator)
        self._formats = formats if formats is not None else default_formats()
        self._encoding = encoding
        initial = copy_tree(tree) if tree is not None else {}
        self._store = TreeStore(resolver, parse_locator(DEFAULT_MEMORY_LOCATOR), initial)
        if locator is not None:
            self.set_prefix(locator)

    def __repr__(self) -> str:
        return f"MemoryBackend({self.locator!r})"

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
        """Store value at path, creating missing sections along the way.

        Raises:
            InvalidInputError: If value is not a string.
            PathConflictError: If a segment before the last names a value,
                or the last segment names a section.
        """
        if not isinstance(value, str):
            raise InvalidInputError(message=f"Value for '{path}' must be a string, got {type(value).__name__}")
        segments = self._store.resolver.split(path)
        with self._store.mutate() as tree:
            node = tree
            for depth, segment in enumerate(segments[:-1]):
                child = node.setdefault(segment, {})
                if not isinstance(child, dict):
                    prefix = self._store.resolver.join(segments[: depth + 1])
                    raise PathConflictError(path, reason=f"'{prefix}' holds a value, not a section")
                node = child
            if isinstance(node.get(segments[-1]), dict):
                raise PathConflictError(path, reason="path names a section")
            node[segments[-1]] = value

    def set_prefix(self, locator: str) -> None:
        """Switch to a fresh named store or seed from a file.

        Raises:
            InvalidLocatorError: If locator is empty or malformed.
            UnsupportedFormatError: For schemes other than memory/file, or an
                unknown file suffix.
            SourceNotFoundError, ParseError: When seeding from a file fails.
        """
        try:
            parsed = parse_locator(locator)
            tree = self._load(parsed)
        except Exception as e:
            logger.warning("Failed to load '%s', keeping '%s': %s", locator, self.locator, e)
            raise
        self._store.replace(parsed, tree)

    def reload(self) -> None:
        """Re-read a file-seeded tree, discarding writes. No-op for memory: locators."""
        current = self._store.locator
        if current.scheme == FILE_SCHEME:
            self.set_prefix(current.raw)

    def _load(self, locator: Locator) -> ConfigTree:
        if locator.scheme == MEMORY_SCHEME:
            return {}
        if locator.scheme == FILE_SCHEME:
            return load_file_tree(locator, self._formats, self._encoding)
        raise UnsupportedFormatError(locator.raw, supported=[f"{MEMORY_SCHEME}:", f"{FILE_SCHEME}:"])
