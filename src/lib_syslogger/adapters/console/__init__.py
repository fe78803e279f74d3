"""Console sinks."""

from __future__ import annotations

from .rich_console import RichConsoleAdapter

__all__ = ["RichConsoleAdapter"]
