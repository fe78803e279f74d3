"""Composable backends that wrap other backends.

Each wrapper implements :class:`~lib_syslogger.application.ports.backend.SysloggerPort`
and forwards the raw message untouched, so wrappers nest in any order.
"""

from __future__ import annotations

from .delay import BackendFactory, Delay, DelayState
from .fallthrough import Fallthrough
from .multi import Multi
from .nowait import NoWait, shared_executor, shutdown_shared_executor
from .severity_filter import SeverityFilter

__all__ = [
    "BackendFactory",
    "Delay",
    "DelayState",
    "Fallthrough",
    "Multi",
    "NoWait",
    "SeverityFilter",
    "shared_executor",
    "shutdown_shared_executor",
]
