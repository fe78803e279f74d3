"""Assemble the backend chain for one ``openlog`` configuration.

Purpose
-------
Translate a :class:`SessionSettings` into a composed backend, degrading
gracefully when transports are unavailable.

Contents
--------
* :func:`build_chain` - the chain-building algorithm.

System Role
-----------
Called by :class:`~lib_syslogger.application.use_cases.posixish.Posixish`
under its exclusive lock, after the previous session's resources have been
released. Resources opened here are appended to the caller's ``closers`` list.

Chain shape
-----------
1. Native transport, when reachable.
2. With ``CONS``: the console device, as the default or as a
   :class:`Fallthrough` fallback behind the native transport.
3. With ``NOFALLBACK`` and without ``PERROR``: nothing reachable is an error.
4. Otherwise standard error joins: mirrored through a try-all :class:`Multi`
   with ``PERROR``, or as the :class:`Fallthrough` fallback.
5. With ``NOWAIT`` the result is wrapped in :class:`NoWait`.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor
from typing import MutableSequence

from lib_syslogger.application.ports.backend import SysloggerPort
from lib_syslogger.application.ports.closable import ClosablePort
from lib_syslogger.application.ports.transports import OpenedTransport, TransportFactoryPort
from lib_syslogger.application.wrappers.fallthrough import Fallthrough
from lib_syslogger.application.wrappers.multi import Multi
from lib_syslogger.application.wrappers.nowait import DiagnosticHook, NoWait
from lib_syslogger.domain.errors import NoDeliveryMechanismError
from lib_syslogger.domain.options import Option
from lib_syslogger.domain.settings import SessionSettings

LOGGER = logging.getLogger(__name__)


def _track(opened: OpenedTransport, closers: MutableSequence[ClosablePort]) -> SysloggerPort:
    if opened.closer is not None:
        closers.append(opened.closer)
    return opened.backend


def build_chain(
    settings: SessionSettings,
    transports: TransportFactoryPort,
    closers: MutableSequence[ClosablePort],
    *,
    nowait_executor: Executor | None = None,
    diagnostic: DiagnosticHook | None = None,
) -> SysloggerPort:
    """Return the backend chain for ``settings``.

    Raises
    ------
    NoDeliveryMechanismError
        When ``NOFALLBACK`` is set, ``PERROR`` is not, and neither the native
        transport nor the requested console could be opened.
    """

    backend: SysloggerPort | None = None

    try:
        backend = _track(transports.open_native(settings), closers)
    except Exception as exc:  # noqa: BLE001
        LOGGER.debug("Native syslog transport unavailable for %r", settings.ident, exc_info=exc)

    if settings.has(Option.CONS):
        try:
            console = _track(transports.open_console(settings), closers)
        except Exception as exc:  # noqa: BLE001
            LOGGER.debug("Console device unavailable", exc_info=exc)
        else:
            backend = console if backend is None else Fallthrough(default=backend, fallback=console)

    mirror = settings.has(Option.PERROR)
    if not mirror and settings.has(Option.NOFALLBACK):
        if backend is None:
            raise NoDeliveryMechanismError(
                "could not reach the system log daemon (nor the console, if requested) and NOFALLBACK "
                "forbids falling back to standard error: no delivery mechanism available",
            )
    else:
        stderr = transports.open_stderr(settings)
        if backend is None:
            backend = stderr
        elif mirror:
            backend = Multi((backend, stderr), try_all=True)
        else:
            backend = Fallthrough(default=backend, fallback=stderr)

    if settings.has(Option.NOWAIT):
        backend = NoWait(backend, executor=nowait_executor, diagnostic=diagnostic)
    return backend


__all__ = ["build_chain"]
