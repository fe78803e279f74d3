"""Backend wrapper broadcasting each message to several backends."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from lib_syslogger.application.ports.backend import SysloggerPort
from lib_syslogger.domain.priority import Priority


@dataclass(slots=True, frozen=True)
class Multi(SysloggerPort):
    """Forward to every backend in order.

    Parameters
    ----------
    backends:
        Ordered backends; an empty sequence makes :meth:`log` a no-op.
    try_all:
        ``False`` stops at the first failure and raises it, so later backends
        never see the message. ``True`` keeps going and raises the first
        failure (by list order) once every backend has been attempted.

    Without ``try_all`` an :class:`UnsupportedMessageError` stops the broadcast
    like any other failure. With ``try_all`` it is recorded like any other
    failure, so a text-only backend cannot keep the message from the rest.
    """

    backends: Sequence[SysloggerPort] = field(default_factory=tuple)
    try_all: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "backends", tuple(self.backends))

    def log(self, priority: Priority, message: Any) -> None:
        first_error: Exception | None = None
        for backend in self.backends:
            try:
                backend.log(priority, message)
            except Exception as exc:  # noqa: BLE001
                if not self.try_all:
                    raise
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error


__all__ = ["Multi"]
