from __future__ import annotations

import socket
from datetime import datetime, timezone

import pytest

from lib_syslogger.adapters.transport import native as native_module
from lib_syslogger.adapters.transport.native import NativeSyslog, SocketConnection, connect_remote
from lib_syslogger.domain.errors import (
    FacilityMismatchError,
    InvalidFacilityError,
    TransportError,
    UnsupportedMessageError,
)
from lib_syslogger.domain.priority import Facility, Priority, Severity
from tests.fakes import FixedClock
from tests.os_markers import OS_AGNOSTIC, POSIX_ONLY

pytestmark = [OS_AGNOSTIC]


class _Connection:
    def __init__(self, *, remote: bool = False, fail_sends: int = 0) -> None:
        self.stream = False
        self.remote = remote
        self.fail_sends = fail_sends
        self.sent: list[bytes] = []
        self.closed = False

    def send(self, payload: bytes) -> None:
        if self.fail_sends:
            self.fail_sends -= 1
            raise BrokenPipeError("daemon restarted")
        self.sent.append(payload)

    def close(self) -> None:
        self.closed = True


class _Connector:
    def __init__(self, *connections: _Connection) -> None:
        self.pending = list(connections)
        self.made: list[_Connection] = []

    def __call__(self) -> _Connection:
        if not self.pending:
            raise ConnectionRefusedError("no daemon")
        connection = self.pending.pop(0)
        self.made.append(connection)
        return connection


def _native(connector: _Connector, **kwargs: object) -> NativeSyslog:
    options = {"facility": Facility.DAEMON, "ident": "svc", "clock": FixedClock(), "process_id": 55}
    options.update(kwargs)
    return NativeSyslog(connector, **options)  # type: ignore[arg-type]


def test_local_framing_uses_session_facility() -> None:
    connection = _Connection()
    native = _native(_Connector(connection))

    native.log(Priority(severity=Severity.ERR), "failed")

    assert connection.sent == [b"<27>Mar  7 09:05:01 svc[55]: failed\n"]


def test_matching_facility_is_accepted() -> None:
    connection = _Connection()

    _native(_Connector(connection)).log(Priority(Facility.DAEMON, Severity.INFO), "ok\n")

    assert connection.sent == [b"<30>Mar  7 09:05:01 svc[55]: ok\n"]


def test_remote_framing_includes_timestamp_and_host() -> None:
    connection = _Connection(remote=True)
    clock = FixedClock(datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc))

    _native(_Connector(connection), clock=clock, hostname="box").log(Priority(severity=Severity.INFO), "hi")

    assert connection.sent == [b"<30>2025-09-30T12:00:00.000000+00:00 box svc[55]: hi\n"]


def test_facility_mismatch_is_rejected() -> None:
    connection = _Connection()

    with pytest.raises(FacilityMismatchError, match="cannot change facility"):
        _native(_Connector(connection)).log(Priority(Facility.MAIL, Severity.INFO), "wrong")

    assert connection.sent == []


def test_only_text_is_accepted() -> None:
    with pytest.raises(UnsupportedMessageError):
        _native(_Connector(_Connection())).log(Priority(severity=Severity.ERR), ValueError("not text"))


def test_invalid_facility_fails_construction() -> None:
    connector = _Connector(_Connection())

    with pytest.raises(InvalidFacilityError):
        _native(connector, facility=0xC0)

    assert connector.made == []


def test_failed_send_reconnects_once() -> None:
    broken = _Connection(fail_sends=1)
    fresh = _Connection()
    native = _native(_Connector(broken, fresh))

    native.log(Priority(severity=Severity.INFO), "retry")

    assert broken.closed
    assert fresh.sent == [b"<30>Mar  7 09:05:01 svc[55]: retry\n"]


def test_second_failure_raises_transport_error() -> None:
    native = _native(_Connector(_Connection(fail_sends=1), _Connection(fail_sends=1)))

    with pytest.raises(TransportError, match="sending to syslog failed"):
        native.log(Priority(severity=Severity.INFO), "lost")

    assert not native.connected


def test_connection_failure_propagates_from_constructor() -> None:
    with pytest.raises(ConnectionRefusedError):
        _native(_Connector())


def test_close_is_idempotent() -> None:
    connection = _Connection()
    native = _native(_Connector(connection))

    native.close()
    native.close()

    assert connection.closed
    assert not native.connected


def test_open_connects_locally(monkeypatch: pytest.MonkeyPatch) -> None:
    connection = _Connection()
    monkeypatch.setattr(native_module, "connect_local", lambda: connection)

    native = NativeSyslog.open(Facility.LOCAL2, "job", clock=FixedClock(), process_id=1)
    native.log(Priority(severity=Severity.NOTICE), "local")

    assert native.facility == Facility.LOCAL2
    assert connection.sent == [b"<149>Mar  7 09:05:01 job[1]: local\n"]


def test_connect_remote_rejects_unknown_network() -> None:
    with pytest.raises(TransportError, match="unsupported network"):
        connect_remote("sctp", "localhost:514")


def test_connect_remote_requires_port() -> None:
    with pytest.raises(TransportError, match="host:port"):
        connect_remote("udp", "localhost")


def test_dial_udp_delivers_remote_record() -> None:
    receiver = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    receiver.bind(("127.0.0.1", 0))
    receiver.settimeout(5)
    port = receiver.getsockname()[1]
    try:
        native = NativeSyslog.dial("udp4", f"127.0.0.1:{port}", Facility.LOCAL0, "remote", hostname="box", process_id=3)
        native.log(Priority(severity=Severity.INFO), "over udp")
        payload = receiver.recv(4096)
        native.close()
    finally:
        receiver.close()

    assert payload.startswith(b"<134>")
    assert payload.endswith(b" box remote[3]: over udp\n")


@POSIX_ONLY
def test_socket_connection_over_unix_datagram(tmp_path) -> None:  # noqa: ANN001
    path = str(tmp_path / "log")
    server = socket.socket(socket.AF_UNIX, socket.SOCK_DGRAM)
    server.bind(path)
    server.settimeout(5)
    try:
        connection = native_module.connect_local((str(tmp_path / "missing"), path))
        connection.send(b"ping")
        received = server.recv(64)
        connection.close()
    finally:
        server.close()

    assert isinstance(connection, SocketConnection)
    assert received == b"ping"
