"""Adapter implementations for formatting, transports, and consoles."""

from __future__ import annotations

from .console.rich_console import RichConsoleAdapter
from .formatting import HumanReadable, Newliner, Rfc3164, Rfc5424
from .structured.journald import JournaldAdapter
from .transport import (
    DevConsole,
    NativeSyslog,
    Stderr,
    StreamWriter,
    SystemTransports,
    WriteCloser,
)

__all__ = [
    "DevConsole",
    "HumanReadable",
    "JournaldAdapter",
    "NativeSyslog",
    "Newliner",
    "Rfc3164",
    "Rfc5424",
    "RichConsoleAdapter",
    "Stderr",
    "StreamWriter",
    "SystemTransports",
    "WriteCloser",
]
