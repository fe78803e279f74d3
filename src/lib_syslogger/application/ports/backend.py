"""Port for logging backends: the single-method contract every component implements."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from lib_syslogger.domain.priority import Priority


@runtime_checkable
class SysloggerPort(Protocol):
    """Record (or forward) one message at one priority.

    Returning normally means success; failures are raised as exceptions.
    ``message`` may be a ``str``, an object with a textual rendering, or an
    exception. Implementations must treat ``priority`` as read-only.
    """

    def log(self, priority: Priority, message: Any) -> None:
        """Deliver ``message`` at ``priority``."""


__all__ = ["SysloggerPort"]
