"""Backend wrapper dropping messages whose severity is masked."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lib_syslogger.application.ports.backend import SysloggerPort
from lib_syslogger.domain.mask import SeverityMask
from lib_syslogger.domain.priority import Priority


@dataclass(slots=True, frozen=True)
class SeverityFilter(SysloggerPort):
    """Forward to ``backend`` unless ``mask`` suppresses the message severity.

    Examples
    --------
    >>> from lib_syslogger.domain.priority import Severity
    >>> seen = []
    >>> class Sink:
    ...     def log(self, priority, message):
    ...         seen.append(message)
    >>> flt = SeverityFilter(Sink(), SeverityMask.up_to(Severity.ERR))
    >>> flt.log(Priority(severity=Severity.DEBUG), "noise")
    >>> flt.log(Priority(severity=Severity.CRIT), "fire")
    >>> seen
    ['fire']
    """

    backend: SysloggerPort
    mask: SeverityMask

    def log(self, priority: Priority, message: Any) -> None:
        if self.mask.masked(priority.severity):
            return
        self.backend.log(priority, message)


__all__ = ["SeverityFilter"]
