"""ConfigTree type and helpers for building and walking trees."""

from __future__ import annotations

from typing import Any, Iterator, Union

from configaccess.errors import InvalidInputError

__all__ = ["ConfigTree", "copy_tree", "iter_leaves", "count_leaves", "stringify_scalar"]

# Nested dicts are sections, str values are leaves. Dict order is file order.
ConfigTree = dict[str, Union[str, "ConfigTree"]]


def copy_tree(data: dict[str, Any], _trail: str = "") -> ConfigTree:
    """Deep-copy a nested mapping, checking that it is a valid ConfigTree.

    Raises:
        InvalidInputError: If a key is not a string or a leaf is not a string.
    """
    if not isinstance(data, dict):
        raise InvalidInputError(message=f"Expected a mapping at '{_trail}', got {type(data).__name__}")
    result: ConfigTree = {}
    for key, value in data.items():
        if not isinstance(key, str):
            raise InvalidInputError(message=f"Tree keys must be strings, got {key!r} under '{_trail}'")
        if isinstance(value, dict):
            result[key] = copy_tree(value, f"{_trail}/{key}")
        elif isinstance(value, str):
            result[key] = value
        else:
            raise InvalidInputError(
                message=f"Leaf '{_trail}/{key}' must be a string, got {type(value).__name__}"
            )
    return result


def iter_leaves(tree: ConfigTree, prefix: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], str]]:
    """Yield (segments, value) for every leaf, depth-first in tree order."""
    for key, value in tree.items():
        segments = prefix + (key,)
        if isinstance(value, dict):
            yield from iter_leaves(value, segments)
        else:
            yield segments, value


def count_leaves(tree: ConfigTree) -> int:
    return sum(1 for _ in iter_leaves(tree))


def stringify_scalar(value: Any) -> str:
    """Render a parsed scalar (YAML/JSON) as a leaf string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
