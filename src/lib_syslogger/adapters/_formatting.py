"""Shared rendering helpers for the formatting and console adapters.

Purpose
-------
Keep timestamp layouts, host/tag resolution, and the human-readable line in
one place so the RFC formatters, :class:`HumanReadable`, and the Rich console
adapter stay consistent.

Contents
--------
* :class:`SystemClock` - default :class:`ClockPort` returning local time.
* :func:`rfc3164_timestamp` / :func:`unix_date` / :func:`rfc5424_timestamp`.
* :func:`resolve_hostname` / :func:`resolve_tag` / :func:`render_tag`.
* :func:`human_readable_line` - ``LOG_FAC LOG_SEV <date> host ident msg``.
"""

from __future__ import annotations

import os
import socket
import sys
from datetime import datetime

from lib_syslogger.application.ports.time import ClockPort
from lib_syslogger.domain.priority import Facility, Priority

# Fixed English abbreviations; strftime("%b") follows the process locale.
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


class SystemClock(ClockPort):
    """Return the current local time with timezone information."""

    def now(self) -> datetime:
        return datetime.now().astimezone()


def rfc3164_timestamp(moment: datetime) -> str:
    """Render ``Mmm dd hh:mm:ss`` with a space-padded day.

    Examples
    --------
    >>> rfc3164_timestamp(datetime(2025, 3, 7, 9, 5, 1))
    'Mar  7 09:05:01'
    """

    return f"{_MONTHS[moment.month - 1]} {moment.day:>2} {moment:%H:%M:%S}"


def unix_date(moment: datetime) -> str:
    """Render the classic ``date(1)`` layout ``Mon Jan  2 15:04:05 MST 2006``.

    Examples
    --------
    >>> from datetime import timezone
    >>> unix_date(datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc))
    'Tue Sep 30 12:00:00 UTC 2025'
    """

    zone = moment.tzname() or "UTC"
    return f"{_WEEKDAYS[moment.weekday()]} {rfc3164_timestamp(moment)} {zone} {moment.year}"


def rfc5424_timestamp(moment: datetime) -> str:
    """Render an RFC 3339 timestamp with microsecond precision.

    Examples
    --------
    >>> from datetime import timezone
    >>> rfc5424_timestamp(datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc))
    '2025-09-30T12:00:00.000000+00:00'
    """

    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment.isoformat(timespec="microseconds")


def resolve_hostname(override: str | None = None) -> str:
    """Return ``override`` or the local hostname, ``localhost`` when unknown."""

    if override:
        return override
    try:
        return socket.gethostname() or "localhost"
    except OSError:
        return "localhost"


def resolve_tag(ident: str) -> str:
    """Return ``ident`` or the running program's name."""

    if ident:
        return ident
    return os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "python"


def render_tag(ident: str, pid: int | None) -> str:
    """Append ``[pid]`` to the resolved tag when a pid is given.

    Examples
    --------
    >>> render_tag("cron", 42)
    'cron[42]'
    >>> render_tag("cron", None)
    'cron'
    """

    tag = resolve_tag(ident)
    return tag if pid is None else f"{tag}[{pid}]"


def facility_label(facility: int) -> str:
    try:
        return Facility(facility).label
    except ValueError:
        return f"Priority({facility:#x})"


def human_readable_line(priority: Priority, text: str, *, moment: datetime, hostname: str, tag: str) -> str:
    """Return the human-readable record.

    Examples
    --------
    >>> from datetime import timezone
    >>> from lib_syslogger.domain.priority import Severity
    >>> human_readable_line(
    ...     Priority(Facility.CRON, Severity.ERR),
    ...     "job failed",
    ...     moment=datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc),
    ...     hostname="box",
    ...     tag="cron[7]",
    ... )
    'LOG_CRON LOG_ERR Tue Sep 30 12:00:00 UTC 2025 box cron[7] job failed'
    """

    return f"{facility_label(priority.facility)} {priority.severity.label} {unix_date(moment)} {hostname} {tag} {text}"


__all__ = [
    "SystemClock",
    "facility_label",
    "human_readable_line",
    "render_tag",
    "resolve_hostname",
    "resolve_tag",
    "rfc3164_timestamp",
    "rfc5424_timestamp",
    "unix_date",
]
