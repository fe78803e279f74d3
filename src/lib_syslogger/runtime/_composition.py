"""Composition root wiring adapters into a session orchestrator.

Purpose
-------
Translate :class:`RuntimeSettings` into a live :class:`Posixish` backed by the
real transports. The helpers here keep wiring small and testable: every
collaborator can be overridden.

System Role
-----------
Anchors the clean-architecture boundary: concrete adapters are imported here
and nowhere else in the application layer.
"""

from __future__ import annotations

from concurrent.futures import Executor

from lib_syslogger import config
from lib_syslogger.adapters.structured.journald import JournaldAdapter
from lib_syslogger.adapters.transport.factories import ConsoleOpener, NativeFactory, SystemTransports
from lib_syslogger.adapters.transport.native import NativeSyslog
from lib_syslogger.application.ports.backend import SysloggerPort
from lib_syslogger.application.ports.time import ClockPort
from lib_syslogger.application.ports.transports import TransportFactoryPort
from lib_syslogger.application.use_cases.posixish import Posixish

from ._settings import DiagnosticHook, RuntimeSettings
from ._state import SessionRuntime


def select_native_factory(native: str) -> NativeFactory:
    """Return the native transport factory named by ``native``."""

    if native == config.NATIVE_JOURNALD:
        return JournaldAdapter.open
    return NativeSyslog.open


def create_session(
    *,
    native: str = config.NATIVE_SYSLOG,
    native_factory: NativeFactory | None = None,
    console_opener: ConsoleOpener | None = None,
    stderr: SysloggerPort | None = None,
    clock: ClockPort | None = None,
    hostname: str | None = None,
    transports: TransportFactoryPort | None = None,
    nowait_executor: Executor | None = None,
    diagnostic: DiagnosticHook = None,
) -> Posixish:
    """Return an unopened :class:`Posixish` wired to the system transports.

    ``transports`` replaces the whole factory; the other keyword arguments
    override single collaborators of :class:`SystemTransports`.
    """

    if transports is None:
        transports = SystemTransports(
            native_factory=native_factory or select_native_factory(native),
            console_opener=console_opener,
            stderr=stderr,
            clock=clock,
            hostname=hostname,
        )
    return Posixish(transports, nowait_executor=nowait_executor, diagnostic=diagnostic)


def build_runtime(
    settings: RuntimeSettings,
    *,
    transports: TransportFactoryPort | None = None,
    nowait_executor: Executor | None = None,
) -> SessionRuntime:
    """Create, open, and mask the process-wide session."""

    session = create_session(
        native=settings.native,
        transports=transports,
        nowait_executor=nowait_executor,
        diagnostic=settings.diagnostic_hook,
    )
    session.openlog(settings.ident, settings.options, settings.facility)
    if settings.mask.suppressed:
        session.set_severity_mask(settings.mask)
    return SessionRuntime(session=session, settings=settings)


__all__ = ["build_runtime", "create_session", "select_native_factory"]
