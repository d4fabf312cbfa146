"""Format dispatch: choose a tree loader from a source path's suffix.

Usage::

    from configaccess.formats import default_formats

    formats = default_formats()
    suffix, loader = formats.select("/etc/app/example.cfg")
    tree = loader(text, "/etc/app/example.cfg")
"""

from __future__ import annotations

import threading
from typing import Callable

from configaccess.errors import InvalidInputError, UnsupportedFormatError
from configaccess.formats.ini import load_ini
from configaccess.formats.structured import load_json, load_yaml
from configaccess.tree import ConfigTree

__all__ = ["Loader", "FormatRegistry", "default_formats", "load_ini", "load_json", "load_yaml"]

# loader(text, source) -> ConfigTree, raising ParseError on bad content
Loader = Callable[[str, str], ConfigTree]


class FormatRegistry:
    """Ordered table of (suffix, loader) pairs.

    Suffixes are compared with an exact, case-sensitive ``endswith`` in
    registration order and the first match wins.
    """

    def __init__(self, entries: list[tuple[str, Loader]] | None = None) -> None:
        self._entries: list[tuple[str, Loader]] = []
        self._lock = threading.Lock()
        for suffix, loader in entries or []:
            self.register(suffix, loader)

    def register(self, suffix: str, loader: Loader) -> None:
        """Append a loader for suffix to the end of the trial order.

        Raises:
            InvalidInputError: If suffix is empty or already registered.
        """
        if not suffix:
            raise InvalidInputError(message="Format suffix must not be empty")
        with self._lock:
            if any(existing == suffix for existing, _ in self._entries):
                raise InvalidInputError(message=f"Format suffix already registered: {suffix}")
            self._entries.append((suffix, loader))

    @property
    def suffixes(self) -> list[str]:
        with self._lock:
            return [suffix for suffix, _ in self._entries]

    def select(self, path: str) -> tuple[str, Loader]:
        """Return (suffix, loader) for the first suffix path ends with.

        Raises:
            UnsupportedFormatError: If no registered suffix matches.
        """
        with self._lock:
            entries = list(self._entries)
        for suffix, loader in entries:
            if path.endswith(suffix):
                return suffix, loader
        raise UnsupportedFormatError(path, supported=[suffix for suffix, _ in entries])

    def __contains__(self, suffix: object) -> bool:
        return suffix in self.suffixes

    def __len__(self) -> int:
        return len(self.suffixes)


def default_formats() -> FormatRegistry:
    """Return a fresh registry with the built-in INI, YAML and JSON loaders."""
    return FormatRegistry(
        [
            (".ini", load_ini),
            (".cfg", load_ini),
            (".yaml", load_yaml),
            (".yml", load_yaml),
            (".json", load_json),
        ]
    )
