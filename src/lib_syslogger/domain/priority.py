"""Facility, severity, and priority values shared by every backend.

Purpose
-------
Offer a domain-specific representation of the syslog priority byte so
backends, wrappers, and the orchestrator never juggle raw integers.

Contents
--------
* :class:`Facility` enum with the 24 subsystem codes from RFC 3164/5424.
* :class:`Severity` enum with the 8 urgency levels (``0`` most urgent).
* :class:`Priority` immutable value combining both.
* :func:`coerce_priority` helper normalising caller input.

System Role
-----------
Lives in the domain layer. Adapters render :class:`Priority` into wire
formats; the severity filter reads :attr:`Priority.severity`; the orchestrator
validates facilities at ``openlog`` time.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum

from .errors import InvalidFacilityError

FACILITY_MASK = 0xF8
SEVERITY_MASK = 0x07


class Facility(IntEnum):
    """Subsystem classification for a log message (RFC 5424 section 6.2.1)."""

    KERN = 0 << 3
    USER = 1 << 3
    MAIL = 2 << 3
    DAEMON = 3 << 3
    AUTH = 4 << 3
    SYSLOG = 5 << 3
    LPR = 6 << 3
    NEWS = 7 << 3
    UUCP = 8 << 3
    CRON = 9 << 3
    AUTHPRIV = 10 << 3
    FTP = 11 << 3
    NTP = 12 << 3
    AUDIT = 13 << 3
    CONSOLE = 14 << 3
    CRON2 = 15 << 3
    LOCAL0 = 16 << 3
    LOCAL1 = 17 << 3
    LOCAL2 = 18 << 3
    LOCAL3 = 19 << 3
    LOCAL4 = 20 << 3
    LOCAL5 = 21 << 3
    LOCAL6 = 22 << 3
    LOCAL7 = 23 << 3

    @property
    def label(self) -> str:
        """Return the C-style constant name, e.g. ``LOG_CRON``."""

        return f"LOG_{self.name}"

    @property
    def code(self) -> int:
        """Return the facility number as used in RFC 5424 (``0``..``23``)."""

        return int(self) >> 3

    @classmethod
    def from_name(cls, name: str) -> "Facility":
        """Resolve ``LOG_CRON``/``cron`` style names.

        Examples
        --------
        >>> Facility.from_name("LOG_LOCAL3") is Facility.LOCAL3
        True
        >>> Facility.from_name(" daemon ") is Facility.DAEMON
        True
        """

        normalized = name.strip().upper()
        if normalized.startswith("LOG_"):
            normalized = normalized[4:]
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown facility: {name!r}") from exc


class Severity(IntEnum):
    """Urgency level for a log message; lower values are more urgent."""

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @property
    def label(self) -> str:
        """Return the C-style constant name, e.g. ``LOG_ERR``."""

        return f"LOG_{self.name}"

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        """Resolve ``LOG_ERR``/``err`` style names."""

        normalized = name.strip().upper()
        if normalized.startswith("LOG_"):
            normalized = normalized[4:]
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown severity: {name!r}") from exc


def validate_facility(value: int) -> None:
    """Raise :class:`InvalidFacilityError` unless ``value`` is a known facility or ``0``."""

    if value & FACILITY_MASK != value or value > Facility.LOCAL7:
        raise InvalidFacilityError(
            f"facility must be one of the 24 syslog facility codes (LOG_KERN..LOG_LOCAL7), got {value:#x}",
        )


@dataclass(slots=True, frozen=True)
class Priority:
    """Immutable combination of a facility and a severity.

    Attributes
    ----------
    facility:
        Raw facility bits. ``0`` doubles as the "unset, use the backend
        default" sentinel. Values outside the 24 known codes can be stored so
        callers can validate them explicitly.
    severity:
        :class:`Severity` of the message.

    Examples
    --------
    >>> p = Priority.decompose(Facility.NEWS | Severity.WARNING)
    >>> p.facility == Facility.NEWS, p.severity is Severity.WARNING
    (True, True)
    >>> p.combine()
    60
    >>> str(p)
    'LOG_NEWS|LOG_WARNING'
    """

    facility: int = 0
    severity: Severity = Severity.EMERG

    def __post_init__(self) -> None:
        object.__setattr__(self, "facility", int(self.facility))
        object.__setattr__(self, "severity", Severity(int(self.severity) & SEVERITY_MASK))

    @classmethod
    def decompose(cls, value: int) -> "Priority":
        """Split a combined priority byte into its facility and severity parts."""

        return cls(facility=value & FACILITY_MASK, severity=Severity(value & SEVERITY_MASK))

    def combine(self) -> int:
        """Return the combined priority value after validating the facility."""

        self.validate_facility()
        return self.facility | int(self.severity)

    def validate_facility(self) -> None:
        """Raise :class:`InvalidFacilityError` when the facility is not a known code."""

        validate_facility(self.facility)

    @property
    def has_valid_facility(self) -> bool:
        try:
            self.validate_facility()
        except InvalidFacilityError:
            return False
        return True

    @property
    def is_empty(self) -> bool:
        """``True`` for the zero priority raw sinks expect."""

        return self.facility == 0 and self.severity is Severity.EMERG

    def with_default_facility(self, default: int) -> "Priority":
        """Return a copy whose unset or invalid facility is replaced by ``default``.

        ``default`` of ``0`` falls back to :attr:`Facility.USER`, matching the C
        library behaviour.
        """

        if self.facility != 0 and self.has_valid_facility:
            return self
        return replace(self, facility=int(default) or Facility.USER)

    def __str__(self) -> str:
        parts: list[str] = []
        if self.facility:
            try:
                parts.append(Facility(self.facility).label)
            except ValueError:
                parts.append(f"Priority({self.facility:#x})")
            if self.severity is Severity.EMERG:
                return parts[0]
        parts.append(self.severity.label)
        return "|".join(parts)


def coerce_priority(value: Priority | Severity | int) -> Priority:
    """Normalise caller-supplied priorities into :class:`Priority`.

    Examples
    --------
    >>> coerce_priority(Severity.ERR) == Priority(severity=Severity.ERR)
    True
    >>> coerce_priority(Facility.MAIL | Severity.INFO).facility == Facility.MAIL
    True
    """

    if isinstance(value, Priority):
        return value
    if isinstance(value, int):
        return Priority.decompose(int(value))
    raise TypeError(f"priority must be a Priority, Severity, or int, got {type(value).__name__}")


__all__ = [
    "FACILITY_MASK",
    "SEVERITY_MASK",
    "Facility",
    "Priority",
    "Severity",
    "coerce_priority",
    "validate_facility",
]
