"""Environment-derived configuration and opt-in ``.env`` loading.

Purpose
-------
Produce the initial options, facility, identity, and severity mask of the
process-wide session from environment variables, mirroring how the C library
reads ``LOG_*`` settings. Optionally populate the environment from the nearest
``.env`` file first.

Contents
--------
* :func:`options_from_env`, :func:`facility_from_env`, :func:`mask_from_env`,
  :func:`ident_from_env`, :func:`native_from_env` - environment readers.
* :data:`DOTENV_ENV_VAR`, :func:`should_use_dotenv`, :func:`enable_dotenv` -
  ``.env`` support built on ``python-dotenv``.

Recognised variables
--------------------
``LOG_PID``, ``LOG_CONS``, ``LOG_ODELAY``, ``LOG_NDELAY``, ``LOG_NOWAIT``,
``LOG_PERROR``, ``LOG_NOFALLBACK``
    Truthy values (``1``, ``true``, ``yes``, ``on``) set the option.
``LOG_FACILITY`` (falling back to ``LOG_PRIORITY``)
    Facility name such as ``LOG_DAEMON``; unknown or absent means ``LOG_USER``.
``LOG_UPTO`` / ``LOG_MASK``
    ``LOG_UPTO=LOG_WARNING`` allows warnings and more urgent messages;
    ``LOG_MASK=LOG_ERR,LOG_CRIT`` allows exactly the listed severities.
``LOG_IDENT``
    Identity used as the syslog tag.
``LOG_NATIVE``
    ``syslog`` (default) or ``journald``.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from lib_syslogger.domain.mask import SeverityMask
from lib_syslogger.domain.options import Option
from lib_syslogger.domain.priority import Facility, Severity

LOGGER = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LIB_SYSLOGGER_USE_DOTENV"
"""Environment toggle enabling ``.env`` loading for the CLI."""

NATIVE_SYSLOG = "syslog"
NATIVE_JOURNALD = "journald"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})

_OPTION_VARS: tuple[tuple[str, Option], ...] = (
    ("LOG_PID", Option.PID),
    ("LOG_CONS", Option.CONS),
    ("LOG_ODELAY", Option.ODELAY),
    ("LOG_NDELAY", Option.NDELAY),
    ("LOG_NOWAIT", Option.NOWAIT),
    ("LOG_PERROR", Option.PERROR),
    ("LOG_NOFALLBACK", Option.NOFALLBACK),
)

_DOTENV_LOCK = threading.Lock()
_DOTENV_LOADED: Path | None = None


def _env(environ: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def _truthy(value: str | None) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


def options_from_env(environ: Mapping[str, str] | None = None) -> Option:
    """Return the :class:`Option` flags enabled through ``LOG_*`` variables.

    Examples
    --------
    >>> options_from_env({"LOG_PID": "1", "LOG_PERROR": "yes", "LOG_CONS": "0"}) == Option.PID | Option.PERROR
    True
    """

    env = _env(environ)
    options = Option(0)
    for name, flag in _OPTION_VARS:
        if _truthy(env.get(name)):
            options |= flag
    return options


def facility_from_env(environ: Mapping[str, str] | None = None) -> Facility:
    """Return the facility named by ``LOG_FACILITY`` or ``LOG_PRIORITY``.

    Examples
    --------
    >>> facility_from_env({"LOG_PRIORITY": "LOG_MAIL"}) is Facility.MAIL
    True
    >>> facility_from_env({"LOG_FACILITY": "bogus"}) is Facility.USER
    True
    """

    env = _env(environ)
    value = env.get("LOG_FACILITY")
    if value is None:
        value = env.get("LOG_PRIORITY")
    if not value:
        return Facility.USER
    try:
        return Facility.from_name(value)
    except ValueError:
        LOGGER.debug("Ignoring unknown facility %r from the environment", value)
        return Facility.USER


def mask_from_env(environ: Mapping[str, str] | None = None) -> SeverityMask:
    """Return the severity mask described by ``LOG_UPTO`` or ``LOG_MASK``.

    Unknown severity names are ignored; an unusable value allows everything.

    Examples
    --------
    >>> mask = mask_from_env({"LOG_UPTO": "LOG_WARNING"})
    >>> mask.masked(Severity.ERR), mask.masked(Severity.INFO)
    (False, True)
    >>> mask = mask_from_env({"LOG_MASK": "LOG_ERR, LOG_DEBUG"})
    >>> mask.masked(Severity.ERR), mask.masked(Severity.CRIT), mask.masked(Severity.DEBUG)
    (False, True, False)
    """

    env = _env(environ)
    upto = env.get("LOG_UPTO")
    if upto:
        try:
            return SeverityMask.up_to(Severity.from_name(upto))
        except ValueError:
            LOGGER.debug("Ignoring unknown LOG_UPTO severity %r", upto)
            return SeverityMask.allow_all()
    listed = env.get("LOG_MASK")
    if listed:
        severities: list[Severity] = []
        for name in listed.split(","):
            if not name.strip():
                continue
            try:
                severities.append(Severity.from_name(name))
            except ValueError:
                LOGGER.debug("Ignoring unknown LOG_MASK severity %r", name)
        if severities:
            return SeverityMask.allowing(*severities)
    return SeverityMask.allow_all()


def ident_from_env(environ: Mapping[str, str] | None = None) -> str:
    return _env(environ).get("LOG_IDENT", "").strip()


def native_from_env(environ: Mapping[str, str] | None = None) -> str:
    """Return ``"syslog"`` or ``"journald"`` from ``LOG_NATIVE``."""

    value = _env(environ).get("LOG_NATIVE", NATIVE_SYSLOG).strip().lower() or NATIVE_SYSLOG
    if value not in {NATIVE_SYSLOG, NATIVE_JOURNALD}:
        LOGGER.debug("Ignoring unknown LOG_NATIVE value %r", value)
        return NATIVE_SYSLOG
    return value


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested.

    An explicit CLI flag wins over the :data:`DOTENV_ENV_VAR` toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="on")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    normalized = env_value.strip().lower()
    if normalized in _FALSY:
        return False
    return normalized in _TRUTHY


def _find_dotenv(search_from: Path | None) -> Path | None:
    if search_from is None:
        found = find_dotenv(usecwd=True)
        return Path(found).resolve() if found else None
    start = search_from.resolve()
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    Parameters
    ----------
    search_from:
        Directory to start the upward search from; defaults to the working
        directory.

    Returns
    -------
    Path | None
        The loaded file, or ``None`` when no ``.env`` was found.
    """

    global _DOTENV_LOADED
    with _DOTENV_LOCK:
        path = _find_dotenv(search_from)
        if path is None:
            LOGGER.debug("No .env file found")
            return None
        load_dotenv(path, override=False)
        _DOTENV_LOADED = path
        return path


def loaded_dotenv() -> Path | None:
    """Return the last ``.env`` loaded by :func:`enable_dotenv`."""

    with _DOTENV_LOCK:
        return _DOTENV_LOADED


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    with _DOTENV_LOCK:
        _DOTENV_LOADED = None


__all__ = [
    "DOTENV_ENV_VAR",
    "NATIVE_JOURNALD",
    "NATIVE_SYSLOG",
    "enable_dotenv",
    "facility_from_env",
    "ident_from_env",
    "loaded_dotenv",
    "mask_from_env",
    "native_from_env",
    "options_from_env",
    "should_use_dotenv",
]
