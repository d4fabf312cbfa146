"""YAML and JSON loaders.

Structure:
    mapping keys -> subtrees (if value is a mapping/list) or leaves (if scalar)
    list indices -> subtree entries named "0", "1", ...
    scalars      -> leaves holding the string representation
"""

from __future__ import annotations

import json
from typing import Any

import yaml

from configaccess.errors import ParseError
from configaccess.tree import ConfigTree, stringify_scalar

__all__ = ["load_yaml", "load_json"]


def _to_tree(node: Any) -> ConfigTree:
    if isinstance(node, list):
        items = ((str(i), v) for i, v in enumerate(node))
    else:
        items = ((stringify_scalar(k), v) for k, v in node.items())

    tree: ConfigTree = {}
    for key, value in items:
        if isinstance(value, (dict, list)):
            tree[key] = _to_tree(value)
        else:
            tree[key] = stringify_scalar(value)
    return tree


def _root_to_tree(data: Any, source: str) -> ConfigTree:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ParseError(source, f"root must be a mapping, got {type(data).__name__}")
    return _to_tree(data)


def load_yaml(text: str, source: str) -> ConfigTree:
    """Parse YAML text into a ConfigTree."""
    try:
        data = yaml.safe_load(text)
    except yaml.MarkedYAMLError as e:
        line = e.problem_mark.line + 1 if e.problem_mark is not None else None
        raise ParseError(source, f"invalid YAML: {e.problem}", line=line, cause=e) from e
    except yaml.YAMLError as e:
        raise ParseError(source, f"invalid YAML: {e}", cause=e) from e
    return _root_to_tree(data, source)


def load_json(text: str, source: str) -> ConfigTree:
    """Parse JSON text into a ConfigTree. Empty text yields an empty tree."""
    if not text.strip():
        return {}
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(source, f"invalid JSON: {e.msg}", line=e.lineno, cause=e) from e
    return _root_to_tree(data, source)
