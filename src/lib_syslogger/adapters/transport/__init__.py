"""Transports delivering records to the syslog daemon, the console, or a stream."""

from __future__ import annotations

from .factories import SystemTransports
from .native import NativeSyslog, SocketConnection, connect_local, connect_remote
from .stream import CONSOLE_DEVICE, DevConsole, Stderr, StreamWriter, WriteCloser

__all__ = [
    "CONSOLE_DEVICE",
    "DevConsole",
    "NativeSyslog",
    "SocketConnection",
    "Stderr",
    "StreamWriter",
    "SystemTransports",
    "WriteCloser",
    "connect_local",
    "connect_remote",
]
