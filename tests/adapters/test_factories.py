from __future__ import annotations

import io

import pytest

from lib_syslogger.adapters.formatting import Newliner, Rfc3164
from lib_syslogger.adapters.transport.factories import SystemTransports
from lib_syslogger.adapters.transport.stream import StreamWriter, WriteCloser
from lib_syslogger.application.use_cases.posixish import Posixish
from lib_syslogger.domain.errors import NoDeliveryMechanismError, TransportError
from lib_syslogger.domain.options import Option
from lib_syslogger.domain.priority import Facility, Priority, Severity
from lib_syslogger.domain.settings import SessionSettings
from tests.fakes import FixedClock, RecordingBackend
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def _refuse(facility: int, ident: str) -> RecordingBackend:
    raise TransportError("no syslog socket")


def test_open_native_tracks_closable_backends() -> None:
    native = RecordingBackend("native")
    seen: list[tuple[int, str]] = []

    def factory(facility: int, ident: str) -> RecordingBackend:
        seen.append((facility, ident))
        return native

    opened = SystemTransports(native_factory=factory).open_native(SessionSettings("svc", Option(0), Facility.MAIL))

    assert seen == [(Facility.MAIL, "svc")]
    assert opened.backend is native
    assert opened.closer is native


def test_stderr_chain_formats_one_line_records() -> None:
    buffer = io.StringIO()
    transports = SystemTransports(stderr=StreamWriter(buffer), clock=FixedClock(), hostname="box")

    chain = transports.open_stderr(SessionSettings("svc", Option.PID, Facility.DAEMON))

    assert isinstance(chain, Rfc3164)
    assert isinstance(chain.sink, Newliner)
    chain.log(Priority(severity=Severity.ERR), "oops")
    assert buffer.getvalue().startswith("<27>Mar  7 09:05:01 box svc[")
    assert buffer.getvalue().endswith("]: oops\n")


def test_console_chain_closes_raw_device() -> None:
    device = WriteCloser(io.StringIO())
    transports = SystemTransports(console_opener=lambda: device, clock=FixedClock(), hostname="box")

    opened = transports.open_console(SessionSettings("svc"))

    assert opened.closer is device
    opened.backend.log(Priority(severity=Severity.CRIT), "console")
    assert device.stream.getvalue() == "<10>Mar  7 09:05:01 box svc: console\n"


def test_session_falls_back_to_stderr_without_daemon() -> None:
    buffer = io.StringIO()
    transports = SystemTransports(native_factory=_refuse, stderr=StreamWriter(buffer), clock=FixedClock(), hostname="box")
    session = Posixish(transports)

    session.openlog("svc", Option.NDELAY)
    session.log(Severity.NOTICE, "degraded")

    assert buffer.getvalue() == "<13>Mar  7 09:05:01 box svc: degraded\n"


def test_nofallback_session_without_daemon_has_no_delivery() -> None:
    session = Posixish(SystemTransports(native_factory=_refuse))

    with pytest.raises(NoDeliveryMechanismError):
        session.openlog("svc", Option.NDELAY | Option.NOFALLBACK)
