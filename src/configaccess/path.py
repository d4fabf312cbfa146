"""Hierarchical path resolution against a ConfigTree."""

from __future__ import annotations

from configaccess.errors import InvalidInputError
from configaccess.tree import ConfigTree

__all__ = ["DEFAULT_SEPARATOR", "PathResolver"]

DEFAULT_SEPARATOR = "."


class PathResolver:
    """Splits path strings on a single separator character and walks a tree.

    The separator is fixed for the lifetime of the resolver. Consecutive
    separators produce empty segment names rather than being collapsed, so
    ``"a..b"`` addresses ``a`` / ``""`` / ``b``.
    """

    def __init__(self, separator: str = DEFAULT_SEPARATOR) -> None:
        if not isinstance(separator, str) or len(separator) != 1:
            raise InvalidInputError(message=f"Separator must be a single character, got {separator!r}")
        self._separator = separator

    @property
    def separator(self) -> str:
        return self._separator

    def split(self, path: str) -> list[str]:
        """Split a path into ordered segments."""
        return path.split(self._separator)

    def join(self, segments: tuple[str, ...] | list[str]) -> str:
        return self._separator.join(segments)

    def resolve(self, tree: ConfigTree, path: str) -> str | None:
        """Return the leaf value at path, or None.

        None is returned when any segment is missing or when the path ends
        on a subtree rather than a leaf.
        """
        node: str | ConfigTree = tree
        for segment in self.split(path):
            if not isinstance(node, dict) or segment not in node:
                return None
            node = node[segment]
        if isinstance(node, dict):
            return None
        return node

    def subtree(self, tree: ConfigTree, path: str) -> ConfigTree | None:
        """Return the subtree at path, or None if absent or a leaf.

        An empty path addresses the root.
        """
        if path == "":
            return tree
        node: str | ConfigTree = tree
        for segment in self.split(path):
            if not isinstance(node, dict) or segment not in node:
                return None
            node = node[segment]
        if isinstance(node, dict):
            return node
        return None
