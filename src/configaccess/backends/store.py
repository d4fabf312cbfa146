"""Lock-guarded tree holder used by the concrete backends."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from configaccess.locator import Locator
from configaccess.path import PathResolver
from configaccess.rwlock import ReadWriteLock
from configaccess.tree import ConfigTree, iter_leaves

__all__ = ["TreeStore"]


class TreeStore:
    """Holds the current (locator, tree) pair of a backend.

    Thread safety:
        Reads take the shared side of a ReadWriteLock. ``replace`` and
        ``mutate`` take the exclusive side, so a reader always sees one
        complete tree.
    """

    def __init__(self, resolver: PathResolver, locator: Locator, tree: ConfigTree) -> None:
        self._resolver = resolver
        self._locator = locator
        self._tree = tree
        self._lock = ReadWriteLock()

    @property
    def resolver(self) -> PathResolver:
        return self._resolver

    @property
    def locator(self) -> Locator:
        with self._lock.read():
            return self._locator

    def get_string(self, path: str) -> str | None:
        with self._lock.read():
            return self._resolver.resolve(self._tree, path)

    def keys(self, prefix: str = "") -> list[str]:
        with self._lock.read():
            subtree = self._resolver.subtree(self._tree, prefix)
            if subtree is None:
                return []
            base = tuple(self._resolver.split(prefix)) if prefix else ()
            return [self._resolver.join(base + segments) for segments, _ in iter_leaves(subtree)]

    def replace(self, locator: Locator, tree: ConfigTree) -> None:
        """Publish a fully built tree and its locator together."""
        with self._lock.write():
            self._locator = locator
            self._tree = tree

    @contextmanager
    def mutate(self) -> Iterator[ConfigTree]:
        """Yield the live tree for in-place edits under the exclusive lock."""
        with self._lock.write():
            yield self._tree
