"""RFC 5424 formatting adapter (nil structured data)."""

from __future__ import annotations

import os
from typing import Any

from lib_syslogger.adapters._formatting import SystemClock, resolve_hostname, resolve_tag, rfc5424_timestamp
from lib_syslogger.application.ports.backend import SysloggerPort
from lib_syslogger.application.ports.time import ClockPort
from lib_syslogger.domain.errors import MessageTooLongError, NoBackendError
from lib_syslogger.domain.message import Message
from lib_syslogger.domain.priority import Priority

MAX_RECORD_BYTES = 2048
_NIL = "-"


def _field(value: str, limit: int) -> str:
    value = "".join(ch for ch in value if 33 <= ord(ch) <= 126)
    return value[:limit] or _NIL


class Rfc5424(SysloggerPort):
    """Format ``<PRI>1 TIMESTAMP HOST APP PROCID MSGID - MSG`` records.

    Header fields are reduced to printable US-ASCII and truncated to the
    lengths RFC 5424 allows; empty fields become ``-``. The complete record is
    capped at 2048 bytes (:class:`MessageTooLongError`).

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from lib_syslogger.domain.priority import Facility, Severity
    >>> class Clock:
    ...     def now(self):
    ...         return datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)
    >>> fmt = Rfc5424(None, ident="web", clock=Clock(), hostname="box")
    >>> fmt.format(Priority(Facility.LOCAL0, Severity.INFO), "ready")
    '<134>1 2025-09-30T12:00:00.000000+00:00 box web - - - ready'
    """

    def __init__(
        self,
        sink: SysloggerPort | None,
        *,
        facility: int = 0,
        ident: str = "",
        pid: bool = False,
        msgid: str = "",
        clock: ClockPort | None = None,
        hostname: str | None = None,
        process_id: int | None = None,
    ) -> None:
        self._sink = sink
        self._facility = int(facility)
        self._ident = ident
        self._pid = pid
        self._msgid = msgid
        self._clock = clock or SystemClock()
        self._hostname = hostname
        self._process_id = process_id

    def format(self, priority: Priority, message: Any) -> str:
        text = Message.of(message).text
        prival = priority.with_default_facility(self._facility).combine()
        procid = str(self._process_id or os.getpid()) if self._pid else _NIL
        record = " ".join(
            (
                f"<{prival}>1",
                rfc5424_timestamp(self._clock.now()),
                _field(resolve_hostname(self._hostname), 255),
                _field(resolve_tag(self._ident), 48),
                _field(procid, 128),
                _field(self._msgid, 32),
                _NIL,
                text,
            ),
        )
        size = len(record.encode("utf-8"))
        if size > MAX_RECORD_BYTES:
            raise MessageTooLongError(
                f"RFC 5424 records are limited to {MAX_RECORD_BYTES} bytes here, the formatted record has {size} bytes",
            )
        return record

    def log(self, priority: Priority, message: Any) -> None:
        if self._sink is None:
            raise NoBackendError("Rfc5424 needs a sink to forward records to")
        self._sink.log(Priority(), self.format(priority, message))


__all__ = ["MAX_RECORD_BYTES", "Rfc5424"]
