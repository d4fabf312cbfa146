"""Source locator parsing.

A locator has the form ``<scheme>:<path>``, e.g. ``file:/etc/app/example.cfg``.
A string without a scheme is taken as a plain file path.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from configaccess.errors import InvalidLocatorError

__all__ = ["Locator", "parse_locator", "FILE_SCHEME", "MEMORY_SCHEME"]

FILE_SCHEME = "file"
MEMORY_SCHEME = "memory"

# Letters and digits only, two characters minimum, so "C:\\app.ini" and "app.v2:x.ini" are paths.
_SCHEME_RE = re.compile(r"^(?P<scheme>[A-Za-z][A-Za-z0-9]+):(?P<path>.*)$", re.DOTALL)


@dataclass(frozen=True)
class Locator:
    """A parsed source locator.

    Attributes:
        scheme: Lower-cased transport name ("file", "memory", ...).
        path: Everything after the scheme separator.
        raw: The locator string as given.
    """

    scheme: str
    path: str
    raw: str

    def __str__(self) -> str:
        return f"{self.scheme}:{self.path}"


def parse_locator(locator: str) -> Locator:
    """Parse a locator string.

    Raises:
        InvalidLocatorError: If the locator is empty, whitespace only, not a
            string, or has a scheme with an empty path.
    """
    if not isinstance(locator, str):
        raise InvalidLocatorError(repr(locator), reason=f"expected str, got {type(locator).__name__}")
    if not locator.strip():
        raise InvalidLocatorError(locator, reason="empty locator")

    match = _SCHEME_RE.match(locator)
    if match is None:
        return Locator(scheme=FILE_SCHEME, path=locator, raw=locator)

    scheme = match.group("scheme").lower()
    path = match.group("path")
    if not path.strip():
        raise InvalidLocatorError(locator, reason=f"missing path after '{scheme}:'")
    return Locator(scheme=scheme, path=path, raw=locator)
