"""Backend wrapper constructing its real backend on first use."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Any, Callable

from lib_syslogger.application.ports.backend import SysloggerPort
from lib_syslogger.domain.errors import MissingFactoryError, NoBackendError
from lib_syslogger.domain.priority import Priority

BackendFactory = Callable[[], SysloggerPort]


class DelayState(Enum):
    EMPTY = "empty"
    BUILT = "built"


class Delay(SysloggerPort):
    """Defer building a backend until the first message arrives.

    The factory runs at most once per successful build even when many threads
    log concurrently; all of them then share the built instance. Only the build
    is serialised: logging through the built backend happens without holding
    the internal lock. When the factory raises, the failure is propagated to
    the caller and the wrapper stays ``EMPTY`` so a later call retries.

    Examples
    --------
    >>> calls = []
    >>> class Sink:
    ...     def log(self, priority, message):
    ...         calls.append(message)
    >>> delay = Delay(Sink)
    >>> delay.state
    <DelayState.EMPTY: 'empty'>
    >>> delay.log(Priority(), "first")
    >>> delay.state, calls
    (<DelayState.BUILT: 'built'>, ['first'])
    """

    def __init__(self, factory: BackendFactory | None) -> None:
        if factory is None:
            raise MissingFactoryError("Delay requires a factory building the deferred backend")
        self._factory = factory
        self._lock = threading.Lock()
        self._backend: SysloggerPort | None = None

    @property
    def state(self) -> DelayState:
        return DelayState.EMPTY if self._backend is None else DelayState.BUILT

    @property
    def backend(self) -> SysloggerPort | None:
        """Return the built backend, or ``None`` while still ``EMPTY``."""

        return self._backend

    def log(self, priority: Priority, message: Any) -> None:
        self._resolve().log(priority, message)

    def reset(self) -> None:
        """Forget the built backend so the next message rebuilds it."""

        with self._lock:
            self._backend = None

    def _resolve(self) -> SysloggerPort:
        backend = self._backend
        if backend is not None:
            return backend
        with self._lock:
            if self._backend is None:
                built = self._factory()
                if built is None:
                    raise NoBackendError("Delay factory returned no backend")
                self._backend = built
            return self._backend


__all__ = ["BackendFactory", "Delay", "DelayState"]
