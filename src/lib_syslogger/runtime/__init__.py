"""Runtime façade around the process-wide default session.

Purpose
-------
Expose a stable entry point (``init``, ``syslog``, the per-severity helpers,
``shutdown``) that host applications use instead of wiring
:class:`~lib_syslogger.application.use_cases.posixish.Posixish` themselves.

Contents
--------
* ``init`` / ``shutdown`` - install and tear down the default session.
* ``current_session`` / ``set_session`` / ``clear_session`` - explicit
  singleton access, replaceable in tests.
* ``openlog`` / ``syslog`` / ``closelog`` / ``set_severity_mask`` - POSIX-style
  calls against the default session.
* ``emerg`` … ``debug`` plus the aliases ``emergency``, ``critical``,
  ``error``, ``warn``, ``information``.

System Role
-----------
Initialise-before-use: every call except ``init``, ``set_session``, and
``is_initialised`` raises :class:`RuntimeError` until a session is installed.
"""

from __future__ import annotations

from concurrent.futures import Executor
from typing import Any, Mapping

from lib_syslogger.application.ports.transports import TransportFactoryPort
from lib_syslogger.application.use_cases.posixish import Posixish
from lib_syslogger.application.wrappers.nowait import shutdown_shared_executor
from lib_syslogger.domain.mask import SeverityMask
from lib_syslogger.domain.options import Option
from lib_syslogger.domain.priority import Facility, Priority, Severity

from ._composition import build_runtime, create_session
from ._settings import DiagnosticHook, RuntimeSettings, build_runtime_settings
from ._state import SessionRuntime, clear_runtime, current_runtime, is_initialised, set_runtime


def init(
    *,
    ident: str | None = None,
    options: Option | int | None = None,
    facility: int | None = None,
    mask: SeverityMask | None = None,
    native: str | None = None,
    diagnostic_hook: DiagnosticHook = None,
    transports: TransportFactoryPort | None = None,
    nowait_executor: Executor | None = None,
    environ: Mapping[str, str] | None = None,
) -> Posixish:
    """Compose the default session from arguments and environment variables.

    Arguments left as ``None`` are read from the environment (see
    :mod:`lib_syslogger.config`). The session is opened immediately; unless
    ``Option.NDELAY`` is set the transports connect on the first message.
    ``nowait_executor`` runs ``Option.NOWAIT`` deliveries in place of the
    shared pool bounded by :data:`~lib_syslogger.application.wrappers.nowait.SHARED_MAX_WORKERS`.

    Raises
    ------
    RuntimeError
        If a session is already installed; call :func:`shutdown` first.
    ConfigurationError
        For conflicting options or an invalid facility.
    """

    if is_initialised():
        raise RuntimeError(
            "lib_syslogger.init() cannot be called twice without shutdown(); call lib_syslogger.shutdown() first",
        )
    settings = build_runtime_settings(
        ident=ident,
        options=options,
        facility=facility,
        mask=mask,
        native=native,
        diagnostic_hook=diagnostic_hook,
        environ=environ,
    )
    runtime = build_runtime(settings, transports=transports, nowait_executor=nowait_executor)
    set_runtime(runtime)
    return runtime.session


def shutdown() -> None:
    """Close the default session, stop background dispatch, and clear state.

    The state is cleared even when releasing a resource fails; that failure is
    re-raised afterwards.
    """

    runtime = clear_runtime()
    if runtime is None:
        raise RuntimeError("lib_syslogger.shutdown() called without an active session")
    try:
        runtime.session.closelog()
    finally:
        shutdown_shared_executor(wait=True)


def current_session() -> Posixish:
    """Return the default session or raise :class:`RuntimeError`."""

    return current_runtime().session


def set_session(session: Posixish, settings: RuntimeSettings | None = None) -> None:
    """Install ``session`` as the default, replacing any previous one without closing it."""

    set_runtime(SessionRuntime(session=session, settings=settings or RuntimeSettings()))


def clear_session() -> Posixish | None:
    """Uninstall the default session without closing it and return it."""

    runtime = clear_runtime()
    return None if runtime is None else runtime.session


def openlog(ident: str = "", options: Option | int = Option(0), facility: int = Facility.USER) -> None:
    current_session().openlog(ident, options, facility)


def syslog(priority: Priority | Severity | int, message: Any) -> None:
    """Log ``message`` at ``priority`` through the default session."""

    current_session().log(priority, message)


def closelog() -> None:
    current_session().closelog()


def set_severity_mask(mask: SeverityMask) -> None:
    current_session().set_severity_mask(mask)


def emerg(message: Any) -> None:
    syslog(Severity.EMERG, message)


def alert(message: Any) -> None:
    syslog(Severity.ALERT, message)


def crit(message: Any) -> None:
    syslog(Severity.CRIT, message)


def err(message: Any) -> None:
    syslog(Severity.ERR, message)


def warning(message: Any) -> None:
    syslog(Severity.WARNING, message)


def notice(message: Any) -> None:
    syslog(Severity.NOTICE, message)


def info(message: Any) -> None:
    syslog(Severity.INFO, message)


def debug(message: Any) -> None:
    syslog(Severity.DEBUG, message)


emergency = emerg
critical = crit
error = err
warn = warning
information = info


def summary_info() -> str:
    """Return the metadata banner used by the CLI ``info`` command."""

    from .. import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = [
    "alert",
    "clear_session",
    "closelog",
    "create_session",
    "crit",
    "critical",
    "current_session",
    "debug",
    "emerg",
    "emergency",
    "err",
    "error",
    "info",
    "information",
    "init",
    "is_initialised",
    "notice",
    "openlog",
    "set_session",
    "set_severity_mask",
    "shutdown",
    "summary_info",
    "syslog",
    "warn",
    "warning",
]
