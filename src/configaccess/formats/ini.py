"""INI/Config file loader.

Structure:
    key = value     -> root leaf ``key`` (before the first section)
    [section]       -> subtree named ``section``
    key = value     -> leaf ``section.key``

Key case is preserved and ``%`` interpolation is disabled, so values come
back exactly as written (minus surrounding whitespace). Lines are trimmed
before parsing: there are no continuation lines, and ``[DEFAULT]`` is an
ordinary section whose keys are not inherited by others.
"""

from __future__ import annotations

import configparser

from configaccess.errors import ParseError
from configaccess.tree import ConfigTree

__all__ = ["load_ini"]

# Holds keys that appear before the first header. NUL never occurs in text config.
_ROOT_SECTION = "\x00root"
# A section name no "[...]" header can produce, so DEFAULT is parsed like any other section.
_NO_DEFAULT_SECTION = "\n"


def _make_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        interpolation=None,
        strict=True,
        default_section=_NO_DEFAULT_SECTION,
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    return parser


def _source_line(lineno: int | None) -> int | None:
    # Parser line numbers count the synthetic root header.
    if lineno is None or lineno <= 1:
        return None
    return lineno - 1


def _header_line(lines: list[str], name: str) -> int | None:
    for lineno, line in enumerate(lines, start=1):
        if line.rstrip() == f"[{name}]":
            return lineno
    return None


def load_ini(text: str, source: str) -> ConfigTree:
    """Parse INI text into a ConfigTree.

    Raises:
        ParseError: On malformed lines, duplicate sections/keys, or a root
            key sharing its name with a section.
    """
    lines = [line.lstrip() for line in text.splitlines()]
    body = "\n".join([f"[{_ROOT_SECTION}]", *lines])

    parser = _make_parser()
    try:
        parser.read_string(body, source=source)
    except configparser.ParsingError as e:
        lineno = e.errors[0][0] if e.errors else None
        raise ParseError(source, "invalid line", line=_source_line(lineno), cause=e) from e
    except configparser.DuplicateSectionError as e:
        raise ParseError(
            source, f"duplicate section name '{e.section}'", line=_source_line(e.lineno), cause=e
        ) from e
    except configparser.DuplicateOptionError as e:
        raise ParseError(source, f"duplicate key name '{e.option}'", line=_source_line(e.lineno), cause=e) from e
    except configparser.Error as e:
        raise ParseError(source, e.message, cause=e) from e

    tree: ConfigTree = dict(parser.items(_ROOT_SECTION, raw=True))
    for section in parser.sections():
        if section == _ROOT_SECTION:
            continue
        if section in tree:
            raise ParseError(source, f"duplicate section name '{section}'", line=_header_line(lines, section))
        tree[section] = dict(parser.items(section, raw=True))
    return tree
