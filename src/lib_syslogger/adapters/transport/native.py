"""Native syslog transport speaking to the local daemon or a remote collector.

Purpose
-------
Deliver plain-text records to ``syslogd`` over a Unix domain socket, or to a
remote collector over UDP/TCP, using the same framing as the C library.

Contents
--------
* :class:`SocketConnection` - thin wrapper over a connected socket.
* :func:`connect_local` / :func:`connect_remote` - connection factories.
* :class:`NativeSyslog` - the :class:`SysloggerPort` implementation.

System Role
-----------
First choice in every chain the session orchestrator builds. Construction
failures degrade the chain (console or standard-error fallbacks take over);
delivery failures surface to the caller as :class:`TransportError`.
"""

from __future__ import annotations

import logging
import os
import socket
import threading
from typing import Any, Callable, Sequence

from lib_syslogger.adapters._formatting import (
    SystemClock,
    render_tag,
    resolve_hostname,
    rfc3164_timestamp,
    rfc5424_timestamp,
)
from lib_syslogger.application.ports.backend import SysloggerPort
from lib_syslogger.application.ports.closable import ClosablePort
from lib_syslogger.application.ports.time import ClockPort
from lib_syslogger.domain.errors import FacilityMismatchError, TransportError, UnsupportedMessageError
from lib_syslogger.domain.message import Message, MessageKind
from lib_syslogger.domain.priority import Facility, Priority, validate_facility

LOGGER = logging.getLogger(__name__)

LOCAL_SOCKET_PATHS: tuple[str, ...] = ("/dev/log", "/var/run/syslog", "/var/run/log")


class SocketConnection:
    """Connected socket plus the framing it needs."""

    def __init__(self, sock: socket.socket, *, stream: bool, remote: bool = False) -> None:
        self._sock = sock
        self.stream = stream
        self.remote = remote

    def send(self, payload: bytes) -> None:
        if self.stream:
            self._sock.sendall(payload)
        else:
            self._sock.send(payload)

    def close(self) -> None:
        self._sock.close()


Connector = Callable[[], SocketConnection]


def connect_local(paths: Sequence[str] = LOCAL_SOCKET_PATHS) -> SocketConnection:
    """Connect to the first reachable local syslog socket.

    Each path is tried with a datagram socket first, then a stream socket.
    """

    family = getattr(socket, "AF_UNIX", None)
    if family is None:
        raise TransportError("Unix domain sockets are not available on this platform")
    errors: list[str] = []
    for path in paths:
        for kind in (socket.SOCK_DGRAM, socket.SOCK_STREAM):
            sock = socket.socket(family, kind)
            try:
                sock.connect(path)
            except OSError as exc:
                sock.close()
                errors.append(f"{path}: {exc}")
                continue
            return SocketConnection(sock, stream=kind == socket.SOCK_STREAM)
    raise TransportError("no local syslog socket reachable (" + "; ".join(errors) + ")")


def connect_remote(network: str, address: str) -> SocketConnection:
    """Connect to ``host:port`` over ``network`` (``udp``/``tcp``, optionally suffixed ``4``/``6``)."""

    proto = network.lower()
    if proto.startswith("udp"):
        kind = socket.SOCK_DGRAM
    elif proto.startswith("tcp"):
        kind = socket.SOCK_STREAM
    else:
        raise TransportError(f"unsupported network {network!r}; expected udp or tcp")
    host, sep, port = address.rpartition(":")
    if not sep or not port.isdigit():
        raise TransportError(f"address must be host:port, got {address!r}")
    host = host.strip("[]") or "localhost"
    family = {"4": socket.AF_INET, "6": socket.AF_INET6}.get(proto[-1], socket.AF_UNSPEC)
    try:
        infos = socket.getaddrinfo(host, int(port), family, kind)
    except OSError as exc:
        raise TransportError(f"cannot resolve {address!r}: {exc}") from exc
    last_error: OSError | None = None
    for af, socktype, sockproto, _canon, sockaddr in infos:
        sock = socket.socket(af, socktype, sockproto)
        try:
            sock.connect(sockaddr)
        except OSError as exc:
            sock.close()
            last_error = exc
            continue
        return SocketConnection(sock, stream=kind == socket.SOCK_STREAM, remote=True)
    raise TransportError(f"cannot connect to {network}://{address}: {last_error}") from last_error


class NativeSyslog(SysloggerPort, ClosablePort):
    """Send plain-text records to a syslog daemon.

    The transport is bound to the facility it was opened with. Messages whose
    priority names a different (non-zero) facility raise
    :class:`FacilityMismatchError`; only ``str`` messages are accepted. A failed
    send reconnects once before raising :class:`TransportError`.

    Examples
    --------
    >>> from datetime import datetime
    >>> from lib_syslogger.domain.priority import Severity
    >>> sent = []
    >>> class Conn:
    ...     stream, remote = False, False
    ...     def send(self, payload):
    ...         sent.append(payload)
    ...     def close(self):
    ...         pass
    >>> class Clock:
    ...     def now(self):
    ...         return datetime(2025, 3, 7, 9, 5, 1)
    >>> native = NativeSyslog(Conn, facility=Facility.MAIL, ident="mta", clock=Clock(), process_id=12)
    >>> native.log(Priority(severity=Severity.WARNING), "queue full")
    >>> sent
    [b'<20>Mar  7 09:05:01 mta[12]: queue full\\n']
    """

    def __init__(
        self,
        connector: Connector,
        *,
        facility: int = Facility.USER,
        ident: str = "",
        clock: ClockPort | None = None,
        hostname: str | None = None,
        process_id: int | None = None,
    ) -> None:
        validate_facility(int(facility))
        self._connector = connector
        self._facility = int(facility)
        self._ident = ident
        self._clock = clock or SystemClock()
        self._hostname = hostname
        self._process_id = process_id
        self._lock = threading.Lock()
        self._conn: SocketConnection | None = connector()

    @classmethod
    def open(cls, facility: int = Facility.USER, ident: str = "", **kwargs: Any) -> "NativeSyslog":
        """Connect to the local daemon (``/dev/log`` and friends)."""

        return cls(connect_local, facility=facility, ident=ident, **kwargs)

    @classmethod
    def dial(cls, network: str, address: str, facility: int = Facility.USER, ident: str = "", **kwargs: Any) -> "NativeSyslog":
        """Connect to a remote collector, e.g. ``dial("udp", "logs.example:514")``."""

        return cls(lambda: connect_remote(network, address), facility=facility, ident=ident, **kwargs)

    @property
    def facility(self) -> int:
        return self._facility

    @property
    def connected(self) -> bool:
        return self._conn is not None

    def log(self, priority: Priority, message: Any) -> None:
        resolved = Message.of(message)
        if resolved.kind is not MessageKind.TEXT:
            raise UnsupportedMessageError(
                f"the native syslog transport only accepts str messages, got {type(message).__name__}",
            )
        if priority.facility and priority.facility != self._facility:
            raise FacilityMismatchError(
                "the native syslog transport cannot change facility after opening: "
                f"opened with {Priority(self._facility)}, message carries {Priority(priority.facility)}",
            )
        self._send(Priority(self._facility, priority.severity), resolved.text)

    def close(self) -> None:
        with self._lock:
            conn, self._conn = self._conn, None
        if conn is None:
            return
        try:
            conn.close()
        except OSError as exc:
            raise TransportError(f"closing the syslog connection failed: {exc}") from exc

    def _frame(self, conn: SocketConnection, priority: Priority, text: str) -> bytes:
        pid = self._process_id or os.getpid()
        tag = render_tag(self._ident, pid)
        newline = "" if text.endswith("\n") else "\n"
        moment = self._clock.now()
        if conn.remote:
            record = f"<{priority.combine()}>{rfc5424_timestamp(moment)} {resolve_hostname(self._hostname)} {tag}: {text}{newline}"
        else:
            record = f"<{priority.combine()}>{rfc3164_timestamp(moment)} {tag}: {text}{newline}"
        return record.encode("utf-8")

    def _send(self, priority: Priority, text: str) -> None:
        with self._lock:
            if self._conn is not None:
                try:
                    self._conn.send(self._frame(self._conn, priority, text))
                    return
                except OSError as exc:
                    LOGGER.debug("Syslog send failed, reconnecting", exc_info=exc)
                    self._drop_connection()
            try:
                self._conn = self._connector()
                self._conn.send(self._frame(self._conn, priority, text))
            except OSError as exc:
                self._drop_connection()
                raise TransportError(f"sending to syslog failed: {exc}") from exc

    def _drop_connection(self) -> None:
        conn, self._conn = self._conn, None
        if conn is None:
            return
        try:
            conn.close()
        except OSError as exc:
            LOGGER.debug("Ignoring error while closing a broken syslog connection", exc_info=exc)


__all__ = ["Connector", "LOCAL_SOCKET_PATHS", "NativeSyslog", "SocketConnection", "connect_local", "connect_remote"]
