"""Port for opening the transports a session chain is built from.

Purpose
-------
Keep the chain builder free of concrete adapters. The builder asks this port
for the native transport, the console device, and standard error, each already
wrapped in whatever formatting it needs.

Contents
--------
* :class:`OpenedTransport` - a ready backend plus the handle to release later.
* :class:`TransportFactoryPort` - the three factory methods.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from lib_syslogger.application.ports.backend import SysloggerPort
from lib_syslogger.application.ports.closable import ClosablePort
from lib_syslogger.domain.settings import SessionSettings


@dataclass(slots=True, frozen=True)
class OpenedTransport:
    """A backend ready for use and the resource owning its handle, if any."""

    backend: SysloggerPort
    closer: ClosablePort | None = None


@runtime_checkable
class TransportFactoryPort(Protocol):
    """Open transports for a session; every method raises when unavailable."""

    def open_native(self, settings: SessionSettings) -> OpenedTransport:
        """Connect to the system log daemon for ``settings.facility``/``settings.ident``."""

    def open_console(self, settings: SessionSettings) -> OpenedTransport:
        """Open the system console, wrapped in an RFC 3164 formatter."""

    def open_stderr(self, settings: SessionSettings) -> SysloggerPort:
        """Return a standard-error backend wrapped in an RFC 3164 formatter."""


__all__ = ["OpenedTransport", "TransportFactoryPort"]
