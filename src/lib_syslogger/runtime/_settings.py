"""Resolve runtime settings from call arguments and the environment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from lib_syslogger import config
from lib_syslogger.domain.errors import ConfigurationError
from lib_syslogger.domain.mask import SeverityMask
from lib_syslogger.domain.options import Option, validate_options
from lib_syslogger.domain.priority import Facility, validate_facility

DiagnosticHook = Callable[[str, dict[str, Any]], None] | None


@dataclass(slots=True, frozen=True)
class RuntimeSettings:
    """Everything needed to compose the process-wide session."""

    ident: str = ""
    options: Option = Option(0)
    facility: int = Facility.USER
    mask: SeverityMask = SeverityMask()
    native: str = config.NATIVE_SYSLOG
    diagnostic_hook: DiagnosticHook = None


def build_runtime_settings(
    *,
    ident: str | None = None,
    options: Option | int | None = None,
    facility: int | None = None,
    mask: SeverityMask | None = None,
    native: str | None = None,
    diagnostic_hook: DiagnosticHook = None,
    environ: Mapping[str, str] | None = None,
) -> RuntimeSettings:
    """Merge explicit arguments with environment defaults.

    Explicit arguments win; anything left as ``None`` is read through
    :mod:`lib_syslogger.config`. Options and facility are validated here so a
    bad configuration fails before any state is installed.

    Examples
    --------
    >>> settings = build_runtime_settings(ident="svc", environ={"LOG_PID": "1", "LOG_FACILITY": "LOG_DAEMON"})
    >>> settings.ident, settings.options == Option.PID, settings.facility == Facility.DAEMON
    ('svc', True, True)
    """

    resolved_options = validate_options(options if options is not None else config.options_from_env(environ))
    resolved_facility = int(facility) if facility is not None else int(config.facility_from_env(environ))
    validate_facility(resolved_facility)
    resolved_native = (native or config.native_from_env(environ)).strip().lower()
    if resolved_native not in {config.NATIVE_SYSLOG, config.NATIVE_JOURNALD}:
        raise ConfigurationError(f"native must be {config.NATIVE_SYSLOG!r} or {config.NATIVE_JOURNALD!r}, got {native!r}")
    return RuntimeSettings(
        ident=ident if ident is not None else config.ident_from_env(environ),
        options=resolved_options,
        facility=resolved_facility or Facility.USER,
        mask=mask if mask is not None else config.mask_from_env(environ),
        native=resolved_native,
        diagnostic_hook=diagnostic_hook,
    )


__all__ = ["DiagnosticHook", "RuntimeSettings", "build_runtime_settings"]
