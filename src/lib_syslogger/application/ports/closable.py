"""Port for resources that must be released when a session closes."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ClosablePort(Protocol):
    """Anything holding a file handle or connection."""

    def close(self) -> None:
        """Release the underlying handle; raise on failure."""


__all__ = ["ClosablePort"]
