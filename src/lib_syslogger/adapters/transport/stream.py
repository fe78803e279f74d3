"""Raw sinks writing already-formatted records to file-like streams.

Purpose
-------
Provide the last hop for the console and standard-error chains. Raw sinks
cannot encode a priority, so they insist on the empty :class:`Priority` that
the formatting adapters forward.

Contents
--------
* :class:`StreamWriter` - writes ``str``/``bytes`` to a stream.
* :class:`WriteCloser` - :class:`StreamWriter` that owns and closes its stream.
* :class:`Stderr` - writes to whatever ``sys.stderr`` is at call time.
* :class:`DevConsole` - opens the system console device.
"""

from __future__ import annotations

import os
import sys
from typing import IO, Any, Callable

from lib_syslogger.application.ports.backend import SysloggerPort
from lib_syslogger.application.ports.closable import ClosablePort
from lib_syslogger.domain.errors import PriorityNotAcceptedError, TransportError, UnsupportedMessageError
from lib_syslogger.domain.priority import Priority

CONSOLE_DEVICE = "/dev/console"


def _write(stream: IO[Any], priority: Priority, message: Any) -> None:
    if not priority.is_empty:
        raise PriorityNotAcceptedError(
            f"raw stream sinks cannot encode priorities and expect an empty priority, got {priority}",
        )
    if not isinstance(message, (str, bytes, bytearray)):
        raise UnsupportedMessageError(f"raw stream sinks accept str or bytes messages, got {type(message).__name__}")
    try:
        if isinstance(message, str):
            stream.write(message)
        else:
            buffer = getattr(stream, "buffer", None)
            if buffer is not None:
                stream.flush()
                buffer.write(bytes(message))
                buffer.flush()
            else:
                stream.write(bytes(message))
        stream.flush()
    except (OSError, ValueError) as exc:
        raise TransportError(f"writing to {getattr(stream, 'name', stream)!r} failed: {exc}") from exc


class StreamWriter(SysloggerPort):
    """Write records to a stream it does not own.

    Examples
    --------
    >>> from io import StringIO
    >>> buf = StringIO()
    >>> StreamWriter(buf).log(Priority(), "plain record\\n")
    >>> buf.getvalue()
    'plain record\\n'
    """

    def __init__(self, stream: IO[Any]) -> None:
        self._stream = stream

    @property
    def stream(self) -> IO[Any]:
        return self._stream

    def log(self, priority: Priority, message: Any) -> None:
        _write(self._stream, priority, message)


class WriteCloser(StreamWriter, ClosablePort):
    """:class:`StreamWriter` that closes its stream on :meth:`close`."""

    def close(self) -> None:
        try:
            self._stream.close()
        except OSError as exc:
            raise TransportError(f"closing {getattr(self._stream, 'name', self._stream)!r} failed: {exc}") from exc


class Stderr(SysloggerPort):
    """Write to ``sys.stderr`` as it is bound when each record arrives.

    Resolving late keeps the sink working when test harnesses or CLIs swap
    ``sys.stderr`` after the chain has been built.
    """

    def log(self, priority: Priority, message: Any) -> None:
        _write(sys.stderr, priority, message)


Opener = Callable[[str], IO[Any]]


def _open_append_only(path: str) -> IO[Any]:
    flags = os.O_WRONLY | os.O_APPEND | getattr(os, "O_NOCTTY", 0)
    fd = os.open(path, flags)
    return os.fdopen(fd, "w", encoding="utf-8", errors="replace")


class DevConsole:
    """Factory for the system console sink."""

    @staticmethod
    def open(path: str = CONSOLE_DEVICE, *, opener: Opener | None = None) -> WriteCloser:
        """Open ``path`` write-only in append mode and wrap it in a :class:`WriteCloser`.

        The device is never created; a missing or unwritable console raises
        :class:`TransportError`.
        """

        try:
            stream = (opener or _open_append_only)(path)
        except OSError as exc:
            raise TransportError(f"cannot open console device {path!r}: {exc}") from exc
        return WriteCloser(stream)


__all__ = ["CONSOLE_DEVICE", "DevConsole", "Opener", "Stderr", "StreamWriter", "WriteCloser"]
