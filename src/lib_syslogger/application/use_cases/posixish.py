"""Session orchestrator with POSIX ``openlog``/``syslog``/``closelog`` semantics.

Purpose
-------
Own one logging session: its identity, options, default facility, the active
backend chain, and the resources that chain holds.

Contents
--------
* :class:`Posixish` - thread-safe orchestrator implementing :class:`SysloggerPort`.

System Role
-----------
The runtime façade keeps one process-wide instance; applications may create
more. Configuration errors are raised synchronously by :meth:`Posixish.openlog`
before any state changes. Transport failures degrade the chain as described in
:mod:`lib_syslogger.application.use_cases.build_chain`.

Locking
-------
A :class:`ReadWriteLock` guards the mutable state. :meth:`Posixish.log` only
reads the backend reference and calls it after releasing the lock;
``openlog``, ``set_severity_mask``, ``closelog``, and deferred builds hold the
exclusive side for their whole duration.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor
from functools import partial
from types import TracebackType
from typing import Any

from lib_syslogger.application.locking import ReadWriteLock
from lib_syslogger.application.ports.backend import SysloggerPort
from lib_syslogger.application.ports.closable import ClosablePort
from lib_syslogger.application.ports.transports import TransportFactoryPort
from lib_syslogger.application.use_cases.build_chain import build_chain
from lib_syslogger.application.use_cases.shutdown import release_resources
from lib_syslogger.application.wrappers.delay import Delay
from lib_syslogger.application.wrappers.nowait import DiagnosticHook
from lib_syslogger.application.wrappers.severity_filter import SeverityFilter
from lib_syslogger.domain.mask import SeverityMask
from lib_syslogger.domain.options import Option, validate_options
from lib_syslogger.domain.priority import Facility, Priority, Severity, coerce_priority, validate_facility
from lib_syslogger.domain.settings import SessionSettings

LOGGER = logging.getLogger(__name__)


class Posixish(SysloggerPort, ClosablePort):
    """Route messages through a chain configured by :meth:`openlog`.

    Parameters
    ----------
    transports:
        Factory for the native, console, and standard-error transports.
    nowait_executor:
        Executor used when ``Option.NOWAIT`` is set; defaults to a shared pool.
    diagnostic:
        Hook receiving ``(name, payload)`` for failures of background
        deliveries.

    Examples
    --------
    >>> from lib_syslogger.application.ports.transports import OpenedTransport
    >>> seen = []
    >>> class Sink:
    ...     def log(self, priority, message):
    ...         seen.append((str(priority), message))
    >>> class Transports:
    ...     def open_native(self, settings):
    ...         return OpenedTransport(Sink())
    ...     def open_console(self, settings):
    ...         raise OSError("no console")
    ...     def open_stderr(self, settings):
    ...         return Sink()
    >>> session = Posixish(Transports())
    >>> session.openlog("demo", Option.NDELAY | Option.NOFALLBACK, Facility.LOCAL1)
    >>> session.log(Facility.LOCAL1 | Severity.INFO, "hello")
    >>> seen
    [('LOG_LOCAL1|LOG_INFO', 'hello')]
    """

    def __init__(
        self,
        transports: TransportFactoryPort,
        *,
        nowait_executor: Executor | None = None,
        diagnostic: DiagnosticHook | None = None,
    ) -> None:
        self._transports = transports
        self._nowait_executor = nowait_executor
        self._diagnostic = diagnostic
        self._lock = ReadWriteLock()
        self._settings = SessionSettings()
        self._backend: SysloggerPort | None = None
        self._closers: list[ClosablePort] = []
        self._generation = 0

    @property
    def settings(self) -> SessionSettings:
        with self._lock.read():
            return self._settings

    @property
    def backend(self) -> SysloggerPort | None:
        """Return the active chain, ``None`` before the first open or log."""

        with self._lock.read():
            return self._backend

    @property
    def resources(self) -> tuple[ClosablePort, ...]:
        with self._lock.read():
            return tuple(self._closers)

    def openlog(self, ident: str = "", options: Option | int = Option(0), facility: int = Facility.USER) -> None:
        """(Re)configure the session.

        ``facility`` ``0`` selects the default (:attr:`Facility.USER`). Raises
        :class:`MutuallyExclusiveOptionsError`, :class:`UnknownOptionError`, or
        :class:`InvalidFacilityError` without touching the current chain. With
        ``Option.NDELAY`` the chain is built immediately and build failures
        propagate; otherwise the build happens on the first message.
        """

        validated = validate_options(options)
        validate_facility(int(facility))
        settings = SessionSettings(ident=ident, options=validated, facility=int(facility) or Facility.USER)

        with self._lock.write():
            self._generation += 1
            self._backend = None
            self._settings = settings
            if validated & Option.NDELAY:
                self._backend = self._build_locked()
            else:
                release_resources(self._closers, strict=False)
                self._backend = self._new_delay()

    def log(self, priority: Priority | Severity | int, message: Any) -> None:
        """Forward ``message`` to the active chain, creating a default one if needed."""

        resolved = coerce_priority(priority)
        with self._lock.read():
            backend = self._backend
        if backend is None:
            with self._lock.write():
                if self._backend is None:
                    self._backend = self._new_delay()
                backend = self._backend
        backend.log(resolved, message)

    def set_severity_mask(self, mask: SeverityMask) -> None:
        """Wrap the active chain in another :class:`SeverityFilter` layer."""

        if not isinstance(mask, SeverityMask):
            raise TypeError(f"mask must be a SeverityMask, got {type(mask).__name__}")
        with self._lock.write():
            if self._backend is None:
                self._backend = self._new_delay()
            self._backend = SeverityFilter(self._backend, mask)

    def closelog(self) -> None:
        """Release every resource and drop the active chain.

        Identity, options, and facility are kept, so a later :meth:`log`
        rebuilds the chain with them. Every resource is closed even if some
        fail; the first failure is raised afterwards.
        """

        with self._lock.write():
            self._generation += 1
            self._backend = None
            release_resources(self._closers)

    def close(self) -> None:
        self.closelog()

    def __enter__(self) -> "Posixish":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.closelog()

    def _new_delay(self) -> Delay:
        return Delay(partial(self._deferred_build, self._generation))

    def _deferred_build(self, generation: int) -> SysloggerPort:
        with self._lock.write():
            if generation != self._generation:
                # Superseded by openlog/closelog: forward to whatever is active now.
                return self
            return self._build_locked()

    def _build_locked(self) -> SysloggerPort:
        release_resources(self._closers, strict=False)
        return build_chain(
            self._settings,
            self._transports,
            self._closers,
            nowait_executor=self._nowait_executor,
            diagnostic=self._diagnostic,
        )


__all__ = ["Posixish"]
