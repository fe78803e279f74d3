"""Human-readable formatting adapter."""

from __future__ import annotations

import os
from typing import Any

from lib_syslogger.adapters._formatting import SystemClock, human_readable_line, render_tag, resolve_hostname
from lib_syslogger.application.ports.backend import SysloggerPort
from lib_syslogger.application.ports.time import ClockPort
from lib_syslogger.domain.message import Message
from lib_syslogger.domain.priority import Priority


class HumanReadable(SysloggerPort):
    """Render ``LOG_FAC LOG_SEV <date> host ident[pid] message`` and forward it.

    Like :class:`~lib_syslogger.adapters.formatting.rfc3164.Rfc3164`, an unset or
    invalid facility is replaced by the configured one (``USER`` by default)
    and the sink receives an empty priority.
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

    def format(self, priority: Priority, message: Any) -> str:
        text = Message.of(message).text
        pid = (self._process_id or os.getpid()) if self._pid else None
        return human_readable_line(
            priority.with_default_facility(self._facility),
            text,
            moment=self._clock.now(),
            hostname=resolve_hostname(self._hostname),
            tag=render_tag(self._ident, pid),
        )

    def log(self, priority: Priority, message: Any) -> None:
        self._sink.log(Priority(), self.format(priority, message))


__all__ = ["HumanReadable"]
