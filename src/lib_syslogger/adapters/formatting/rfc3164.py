"""RFC 3164 (BSD syslog) formatting adapter.

Purpose
-------
Turn a priority and message into the classic BSD syslog record
``<PRI>Mmm dd hh:mm:ss host tag[pid]: message`` and hand the rendered text to
a raw sink.

System Role
-----------
Used by the chain builder in front of the console device and standard error.
The sink receives an empty :class:`Priority` because the priority is already
encoded in the record.
"""

from __future__ import annotations

import os
from typing import Any

from lib_syslogger.adapters._formatting import SystemClock, render_tag, resolve_hostname, rfc3164_timestamp
from lib_syslogger.application.ports.backend import SysloggerPort
from lib_syslogger.application.ports.time import ClockPort
from lib_syslogger.domain.errors import MessageTooLongError
from lib_syslogger.domain.message import Message
from lib_syslogger.domain.priority import Priority

MAX_RECORD_BYTES = 1024


class Rfc3164(SysloggerPort):
    """Format records per RFC 3164 and forward them to ``sink``.

    Parameters
    ----------
    sink:
        Raw backend receiving the rendered record with an empty priority.
    facility:
        Facility used when a message carries an unset or invalid facility.
        ``0`` means :attr:`Facility.USER`.
    ident:
        Tag placed before the message; defaults to the program name.
    pid:
        Append ``[pid]`` to the tag.
    clock, hostname, process_id:
        Overrides for deterministic output.

    Records longer than 1024 bytes (UTF-8) raise :class:`MessageTooLongError`;
    nothing is truncated.

    Examples
    --------
    >>> from datetime import datetime
    >>> from lib_syslogger.domain.priority import Facility, Severity
    >>> class Clock:
    ...     def now(self):
    ...         return datetime(2025, 3, 7, 9, 5, 1)
    >>> out = []
    >>> class Sink:
    ...     def log(self, priority, message):
    ...         out.append(message)
    >>> fmt = Rfc3164(Sink(), ident="backup", pid=True, clock=Clock(), hostname="box", process_id=99)
    >>> fmt.log(Priority(Facility.DAEMON, Severity.NOTICE), "started")
    >>> out
    ['<29>Mar  7 09:05:01 box backup[99]: started']
    """

    def __init__(
        self,
        sink: SysloggerPort,
        *,
        facility: int = 0,
        ident: str = "",
        pid: bool = False,
        clock: ClockPort | None = None,
        hostname: str | None = None,
        process_id: int | None = None,
    ) -> None:
        self._sink = sink
        self._facility = int(facility)
        self._ident = ident
        self._pid = pid
        self._clock = clock or SystemClock()
        self._hostname = hostname
        self._process_id = process_id

    @property
    def sink(self) -> SysloggerPort:
        return self._sink

    def format(self, priority: Priority, message: Any) -> str:
        """Return the record for ``message`` without forwarding it."""

        text = Message.of(message).text
        prival = priority.with_default_facility(self._facility).combine()
        pid = (self._process_id or os.getpid()) if self._pid else None
        record = (
            f"<{prival}>{rfc3164_timestamp(self._clock.now())} "
            f"{resolve_hostname(self._hostname)} {render_tag(self._ident, pid)}: {text}"
        )
        size = len(record.encode("utf-8"))
        if size > MAX_RECORD_BYTES:
            raise MessageTooLongError(
                f"RFC 3164 records are limited to {MAX_RECORD_BYTES} bytes, the formatted record has {size} bytes",
            )
        return record

    def log(self, priority: Priority, message: Any) -> None:
        self._sink.log(Priority(), self.format(priority, message))


__all__ = ["MAX_RECORD_BYTES", "Rfc3164"]
