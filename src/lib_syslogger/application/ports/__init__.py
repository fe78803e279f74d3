"""Protocols the application layer depends on."""

from __future__ import annotations

from .backend import SysloggerPort
from .closable import ClosablePort
from .time import ClockPort
from .transports import OpenedTransport, TransportFactoryPort

__all__ = ["ClockPort", "ClosablePort", "OpenedTransport", "SysloggerPort", "TransportFactoryPort"]
