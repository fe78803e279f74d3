"""Release the resources a session accumulated while building its chain.

Purpose
-------
Provide the single routine ``closelog`` and chain rebuilds use to close file
handles and sockets, so resource accounting always runs from the list the
orchestrator owns and never from a backend reference a reader may hold.
"""

from __future__ import annotations

import logging
from typing import MutableSequence

from lib_syslogger.application.ports.closable import ClosablePort

LOGGER = logging.getLogger(__name__)


def release_resources(closers: MutableSequence[ClosablePort], *, strict: bool = True) -> None:
    """Close every resource in ``closers`` and empty the list.

    Every ``close`` is attempted even after a failure. Failures are logged at
    ``WARNING``; with ``strict`` the first one is re-raised once all resources
    have been visited.

    Examples
    --------
    >>> class Handle:
    ...     closed = False
    ...     def close(self):
    ...         self.closed = True
    >>> handles = [Handle(), Handle()]
    >>> pending = list(handles)
    >>> release_resources(pending)
    >>> pending, [h.closed for h in handles]
    ([], [True, True])
    """

    pending = list(closers)
    del closers[:]
    first_error: Exception | None = None
    for closer in pending:
        try:
            closer.close()
        except Exception as exc:  # noqa: BLE001
            LOGGER.warning("Releasing %r failed", closer, exc_info=exc)
            if first_error is None:
                first_error = exc
    if strict and first_error is not None:
        raise first_error


__all__ = ["release_resources"]
