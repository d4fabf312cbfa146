"""Backend protocol shared by every configuration source."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ["Backend"]


@runtime_checkable
class Backend(Protocol):
    """Uniform access to hierarchical configuration.

    Paths are segments joined by the backend's separator (``"."`` unless
    configured otherwise), e.g. ``"section.key"``.

    Implementations must:
        - return None from get_string for missing paths and for paths that
          end on a section rather than a value;
        - raise UnsupportedOperationError from put_string when read-only;
        - keep the previously loaded tree intact when set_prefix or reload
          fails.
    """

    @property
    def locator(self) -> str:
        """The locator of the currently loaded source."""
        ...

    @property
    def separator(self) -> str:
        ...

    def get_string(self, path: str) -> str | None:
        """Return the value at path, or None if there is none."""
        ...

    def put_string(self, path: str, value: str) -> None:
        """Store value at path."""
        ...

    def set_prefix(self, locator: str) -> None:
        """Re-point the backend at a new source and reload it."""
        ...

    def reload(self) -> None:
        """Re-read the current source."""
        ...

    def has(self, path: str) -> bool:
        ...

    def keys(self, prefix: str = "") -> list[str]:
        """Return the full paths of all values under prefix, in tree order."""
        ...
