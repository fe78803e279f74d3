"""Rich-powered console sink for interactive terminals.

Purpose
-------
Render records as human-readable lines with per-severity colours so a
developer watching a terminal can spot errors at a glance.

Contents
--------
* :data:`_STYLE_MAP` - default severity-to-style mapping (``classic`` theme).
* :class:`RichConsoleAdapter` - :class:`SysloggerPort` printing through Rich.

System Role
-----------
Used by the ``logdemo`` CLI command and available to callers composing their
own chains (for example ``Multi([NativeSyslog.open(), RichConsoleAdapter()])``).
"""

from __future__ import annotations

import os
from typing import Any, Mapping

from rich.console import Console

from lib_syslogger.adapters._formatting import SystemClock, human_readable_line, render_tag, resolve_hostname
from lib_syslogger.application.ports.backend import SysloggerPort
from lib_syslogger.application.ports.time import ClockPort
from lib_syslogger.domain.message import Message
from lib_syslogger.domain.palettes import CONSOLE_STYLE_THEMES
from lib_syslogger.domain.priority import Priority, Severity

#: Default Rich styles keyed by :class:`Severity`.
_STYLE_MAP: Mapping[Severity, str] = {Severity.from_name(name): style for name, style in CONSOLE_STYLE_THEMES["classic"].items()}


class RichConsoleAdapter(SysloggerPort):
    """Print records using Rich formatting with theme overrides."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[Severity | str, str] | None = None,
        facility: int = 0,
        ident: str = "",
        pid: bool = False,
        clock: ClockPort | None = None,
        hostname: str | None = None,
    ) -> None:
        """Configure the console with colour and style overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(stderr=True, force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            severity = Severity.from_name(key) if isinstance(key, str) else Severity(key)
            merged[severity] = value
        self._style_map = merged
        self._facility = int(facility)
        self._ident = ident
        self._pid = pid
        self._clock = clock or SystemClock()
        self._hostname = hostname

    @property
    def console(self) -> Console:
        return self._console

    def style_for(self, severity: Severity) -> str:
        return "" if self._no_color else self._style_map.get(severity, "")

    def log(self, priority: Priority, message: Any) -> None:
        """Print the record.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True)
        >>> adapter = RichConsoleAdapter(console=console, ident="demo", hostname="box")
        >>> adapter.log(Priority(severity=Severity.INFO), "ready")
        >>> text = console.export_text()
        >>> "LOG_USER LOG_INFO" in text and "box demo ready" in text
        True
        """
        line = self.format_line(priority, message)
        self._console.print(line, style=self.style_for(priority.severity), highlight=False, markup=False, soft_wrap=True)

    def format_line(self, priority: Priority, message: Any) -> str:
        text = Message.of(message).text
        pid = os.getpid() if self._pid else None
        return human_readable_line(
            priority.with_default_facility(self._facility),
            text,
            moment=self._clock.now(),
            hostname=resolve_hostname(self._hostname),
            tag=render_tag(self._ident, pid),
        )


__all__ = ["RichConsoleAdapter"]
