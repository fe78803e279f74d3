"""Runtime state container and access helpers."""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock

from lib_syslogger.application.use_cases.posixish import Posixish

from ._settings import RuntimeSettings


@dataclass(slots=True)
class SessionRuntime:
    """The process-wide session and the settings it was composed from."""

    session: Posixish
    settings: RuntimeSettings


_STATE: SessionRuntime | None = None
_STATE_LOCK = RLock()


def set_runtime(runtime: SessionRuntime) -> None:
    """Install ``runtime`` as the active singleton."""

    with _STATE_LOCK:
        global _STATE
        _STATE = runtime


def clear_runtime() -> SessionRuntime | None:
    """Remove the active runtime if present and return it."""

    with _STATE_LOCK:
        global _STATE
        previous, _STATE = _STATE, None
        return previous


def current_runtime() -> SessionRuntime:
    """Return the active runtime or raise when uninitialised."""

    with _STATE_LOCK:
        if _STATE is None:
            raise RuntimeError("lib_syslogger.init() must be called before using the logging API")
        return _STATE


def is_initialised() -> bool:
    """Return ``True`` when :func:`lib_syslogger.init` has been called."""

    with _STATE_LOCK:
        return _STATE is not None


__all__ = [
    "SessionRuntime",
    "clear_runtime",
    "current_runtime",
    "is_initialised",
    "set_runtime",
]
