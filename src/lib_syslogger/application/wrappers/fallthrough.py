"""Backend wrapper trying a fallback only after the default backend fails."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from lib_syslogger.application.ports.backend import SysloggerPort
from lib_syslogger.domain.errors import NoBackendError, UnsupportedMessageError
from lib_syslogger.domain.priority import Priority

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Fallthrough(SysloggerPort):
    """Log to ``default``; on failure log to ``fallback`` instead.

    Either side may be ``None``. When both are missing every call raises
    :class:`NoBackendError`. A failing ``default`` without a ``fallback``
    re-raises the original failure. The same message may reach both backends
    (the default can fail after a partial write), so callers must not assume
    at-most-once delivery. :class:`UnsupportedMessageError` is never retried.
    """

    default: SysloggerPort | None = None
    fallback: SysloggerPort | None = None

    def log(self, priority: Priority, message: Any) -> None:
        if self.default is None:
            if self.fallback is None:
                raise NoBackendError("Fallthrough has neither a default nor a fallback backend; no usable backend")
            self.fallback.log(priority, message)
            return

        try:
            self.default.log(priority, message)
        except UnsupportedMessageError:
            raise
        except Exception as exc:  # noqa: BLE001
            if self.fallback is None:
                raise
            LOGGER.debug("Default backend %r failed; falling through", self.default, exc_info=exc)
            self.fallback.log(priority, message)


__all__ = ["Fallthrough"]
