"""Behavioural flags accepted by :meth:`Posixish.openlog`."""

from __future__ import annotations

from enum import IntFlag

from .errors import MutuallyExclusiveOptionsError, UnknownOptionError


class Option(IntFlag):
    """Bitwise combinable ``openlog`` options.

    ``ODELAY`` and ``NDELAY`` are mutually exclusive; delaying is the default
    when neither is set.
    """

    PID = 0x01
    """Include the process id in every record."""
    CONS = 0x02
    """Write to the system console when the native transport fails."""
    ODELAY = 0x04
    """Open transports on the first message (default)."""
    NDELAY = 0x08
    """Open transports immediately inside ``openlog``."""
    NOWAIT = 0x10
    """Dispatch records in the background without waiting for the outcome."""
    PERROR = 0x20
    """Mirror every record to standard error."""
    NOFALLBACK = 0x40
    """Do not fall back to standard error when nothing else is reachable."""


OPTIONS_MASK = 0x7F


def validate_options(options: int) -> Option:
    """Return ``options`` as :class:`Option` after checking for conflicts.

    Examples
    --------
    >>> validate_options(Option.PID | Option.NDELAY) == Option.PID | Option.NDELAY
    True
    >>> validate_options(Option.ODELAY | Option.NDELAY)
    Traceback (most recent call last):
    ...
    lib_syslogger.domain.errors.MutuallyExclusiveOptionsError: ODELAY and NDELAY are mutually exclusive options
    """

    value = int(options)
    if value & Option.ODELAY and value & Option.NDELAY:
        raise MutuallyExclusiveOptionsError("ODELAY and NDELAY are mutually exclusive options")
    if value & OPTIONS_MASK != value:
        raise UnknownOptionError(f"unknown option bits set: {value & ~OPTIONS_MASK:#x}")
    return Option(value)


__all__ = ["OPTIONS_MASK", "Option", "validate_options"]
