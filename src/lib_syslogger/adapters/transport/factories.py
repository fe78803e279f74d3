"""Concrete :class:`TransportFactoryPort` wiring the real transports.

The console and standard-error sinks are wrapped as
``Rfc3164 -> Newliner -> raw stream`` so each record is a single line.
"""

from __future__ import annotations

from typing import Callable

from lib_syslogger.adapters.formatting.newliner import Newliner
from lib_syslogger.adapters.formatting.rfc3164 import Rfc3164
from lib_syslogger.adapters.transport.native import NativeSyslog
from lib_syslogger.adapters.transport.stream import DevConsole, Stderr
from lib_syslogger.application.ports.backend import SysloggerPort
from lib_syslogger.application.ports.closable import ClosablePort
from lib_syslogger.application.ports.time import ClockPort
from lib_syslogger.application.ports.transports import OpenedTransport, TransportFactoryPort
from lib_syslogger.domain.options import Option
from lib_syslogger.domain.settings import SessionSettings

NativeFactory = Callable[[int, str], SysloggerPort]
ConsoleOpener = Callable[[], SysloggerPort]


class SystemTransports(TransportFactoryPort):
    """Open the local syslog socket, ``/dev/console``, and ``sys.stderr``.

    Parameters
    ----------
    native_factory:
        ``(facility, ident) -> backend``; defaults to :meth:`NativeSyslog.open`.
        :meth:`JournaldAdapter.open` fits the same signature.
    console_opener:
        Returns the raw console sink; defaults to :meth:`DevConsole.open`.
    stderr:
        Raw sink used for standard error; defaults to :class:`Stderr`.
    clock, hostname:
        Passed to the RFC 3164 formatters.
    """

    def __init__(
        self,
        *,
        native_factory: NativeFactory | None = None,
        console_opener: ConsoleOpener | None = None,
        stderr: SysloggerPort | None = None,
        clock: ClockPort | None = None,
        hostname: str | None = None,
    ) -> None:
        self._native_factory = native_factory or NativeSyslog.open
        self._console_opener = console_opener or DevConsole.open
        self._stderr = stderr or Stderr()
        self._clock = clock
        self._hostname = hostname

    def open_native(self, settings: SessionSettings) -> OpenedTransport:
        backend = self._native_factory(settings.facility, settings.ident)
        return OpenedTransport(backend, backend if isinstance(backend, ClosablePort) else None)

    def open_console(self, settings: SessionSettings) -> OpenedTransport:
        raw = self._console_opener()
        return OpenedTransport(self._format(raw, settings), raw if isinstance(raw, ClosablePort) else None)

    def open_stderr(self, settings: SessionSettings) -> SysloggerPort:
        return self._format(self._stderr, settings)

    def _format(self, raw: SysloggerPort, settings: SessionSettings) -> Rfc3164:
        return Rfc3164(
            Newliner(raw),
            facility=settings.facility,
            ident=settings.ident,
            pid=settings.has(Option.PID),
            clock=self._clock,
            hostname=self._hostname,
        )


__all__ = ["ConsoleOpener", "NativeFactory", "SystemTransports"]
