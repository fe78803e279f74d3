"""Adapter guaranteeing that every record ends with a newline."""

from __future__ import annotations

from typing import Any

from lib_syslogger.application.ports.backend import SysloggerPort
from lib_syslogger.domain.message import Message
from lib_syslogger.domain.priority import Priority


class Newliner(SysloggerPort):
    """Append ``"\\n"`` unless the rendered message already ends with one.

    Examples
    --------
    >>> out = []
    >>> class Sink:
    ...     def log(self, priority, message):
    ...         out.append(message)
    >>> Newliner(Sink()).log(Priority(), "one")
    >>> Newliner(Sink()).log(Priority(), "two\\n")
    >>> out
    ['one\\n', 'two\\n']
    """

    def __init__(self, sink: SysloggerPort) -> None:
        self._sink = sink

    @property
    def sink(self) -> SysloggerPort:
        return self._sink

    def log(self, priority: Priority, message: Any) -> None:
        text = Message.of(message).text
        if not text.endswith("\n"):
            text += "\n"
        self._sink.log(priority, text)


__all__ = ["Newliner"]
