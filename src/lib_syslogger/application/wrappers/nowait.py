"""Backend wrapper dispatching each message on a worker thread.

Purpose
-------
Keep the caller's thread free of transport latency. :meth:`NoWait.log` hands
the message to an executor and returns immediately; the outcome of the
delivery is not reported back to the caller.

System Role
-----------
Installed as the outermost layer of a chain when ``openlog`` receives
``Option.NOWAIT``. Failed deliveries are written to this module's logger at
``DEBUG`` and forwarded to the optional diagnostic hook so operators can still
notice a broken transport.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Any, Callable

from lib_syslogger.application.ports.backend import SysloggerPort
from lib_syslogger.domain.errors import NoBackendError
from lib_syslogger.domain.priority import Priority

LOGGER = logging.getLogger(__name__)

DiagnosticHook = Callable[[str, dict[str, Any]], None]

SHARED_MAX_WORKERS = 4
"""Worker threads of the shared pool.

Background deliveries beyond this many in flight queue up inside the pool
instead of starting new threads. Inject an executor (``Posixish(nowait_executor=...)``,
``create_session(nowait_executor=...)`` or ``init(nowait_executor=...)``) when a
session needs a different bound.
"""

_SHARED_EXECUTOR: ThreadPoolExecutor | None = None
_SHARED_LOCK = threading.Lock()


def shared_executor() -> ThreadPoolExecutor:
    """Return the process-wide executor used when none is injected.

    The pool is bounded by :data:`SHARED_MAX_WORKERS`; dispatch order across
    workers is not preserved.
    """

    global _SHARED_EXECUTOR
    with _SHARED_LOCK:
        if _SHARED_EXECUTOR is None:
            _SHARED_EXECUTOR = ThreadPoolExecutor(
                max_workers=SHARED_MAX_WORKERS,
                thread_name_prefix="lib_syslogger-nowait",
            )
        return _SHARED_EXECUTOR


def shutdown_shared_executor(*, wait: bool = True) -> None:
    """Stop the shared executor; a later :class:`NoWait` dispatch recreates it."""

    global _SHARED_EXECUTOR
    with _SHARED_LOCK:
        executor, _SHARED_EXECUTOR = _SHARED_EXECUTOR, None
    if executor is not None:
        executor.shutdown(wait=wait)


class NoWait(SysloggerPort):
    """Fire-and-forget dispatch to ``backend``.

    Parameters
    ----------
    backend:
        Backend receiving the message on a worker thread. ``None`` makes every
        call raise :class:`NoBackendError` synchronously.
    executor:
        Executor running the deliveries. Defaults to :func:`shared_executor`.
    diagnostic:
        Optional ``(name, payload)`` hook invoked when a background delivery
        fails. Exceptions raised by the hook are logged and discarded.

    Examples
    --------
    >>> class Inline:
    ...     def submit(self, fn, *args):
    ...         fn(*args)
    >>> seen = []
    >>> class Sink:
    ...     def log(self, priority, message):
    ...         seen.append(message)
    >>> NoWait(Sink(), executor=Inline()).log(Priority(), "queued")
    >>> seen
    ['queued']
    """

    def __init__(
        self,
        backend: SysloggerPort | None,
        *,
        executor: Executor | None = None,
        diagnostic: DiagnosticHook | None = None,
    ) -> None:
        self._backend = backend
        self._executor = executor
        self._diagnostic = diagnostic

    @property
    def backend(self) -> SysloggerPort | None:
        return self._backend

    def log(self, priority: Priority, message: Any) -> None:
        backend = self._backend
        if backend is None:
            raise NoBackendError("NoWait requires a backend to dispatch to")
        executor = self._executor if self._executor is not None else shared_executor()
        executor.submit(self._deliver, backend, priority, message)

    def _deliver(self, backend: SysloggerPort, priority: Priority, message: Any) -> None:
        try:
            backend.log(priority, message)
        except Exception as exc:  # noqa: BLE001
            LOGGER.debug("Background delivery to %r failed", backend, exc_info=exc)
            self._emit_diagnostic(
                "nowait_delivery_failed",
                {"priority": str(priority), "backend": repr(backend), "exception": repr(exc)},
            )

    def _emit_diagnostic(self, name: str, payload: dict[str, Any]) -> None:
        """Invoke the diagnostic hook while guarding against callback failures."""

        if self._diagnostic is None:
            return
        try:
            self._diagnostic(name, payload)
        except Exception as diagnostic_exc:  # noqa: BLE001
            LOGGER.error("NoWait diagnostic hook raised while reporting %s", name, exc_info=diagnostic_exc)


__all__ = ["SHARED_MAX_WORKERS", "DiagnosticHook", "NoWait", "shared_executor", "shutdown_shared_executor"]
