from __future__ import annotations

from typing import Any, Iterator

import pytest

import lib_syslogger as log
from lib_syslogger.adapters.structured.journald import JournaldAdapter
from lib_syslogger.adapters.transport.native import NativeSyslog
from lib_syslogger.application.wrappers import Delay, SeverityFilter
from lib_syslogger.application.wrappers.nowait import SHARED_MAX_WORKERS, shared_executor
from lib_syslogger.domain.errors import ConfigurationError, MutuallyExclusiveOptionsError
from lib_syslogger.runtime._composition import select_native_factory
from tests.fakes import FakeTransports, InlineExecutor
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


@pytest.fixture(autouse=True)
def _clean_runtime() -> Iterator[None]:
    log.clear_session()
    yield
    session = log.clear_session()
    if session is not None:
        session.closelog()


def test_api_requires_init() -> None:
    with pytest.raises(RuntimeError, match="must be called before"):
        log.info("too early")
    with pytest.raises(RuntimeError):
        log.current_session()
    assert not log.is_initialised()


def test_init_opens_session_from_environment(fake_transports: FakeTransports) -> None:
    session = log.init(
        transports=fake_transports,
        environ={"LOG_IDENT": "svc", "LOG_PID": "1", "LOG_FACILITY": "LOG_DAEMON"},
    )

    assert log.current_session() is session
    assert session.settings.ident == "svc"
    assert session.settings.options == log.Option.PID
    assert session.settings.facility == log.Facility.DAEMON
    assert isinstance(session.backend, Delay)


def test_explicit_arguments_override_environment(fake_transports: FakeTransports) -> None:
    session = log.init(ident="explicit", facility=log.Facility.LOCAL0, transports=fake_transports, environ={"LOG_IDENT": "env"})

    assert session.settings.ident == "explicit"
    assert session.settings.facility == log.Facility.LOCAL0


def test_init_twice_raises(fake_transports: FakeTransports) -> None:
    log.init(transports=fake_transports, environ={})

    with pytest.raises(RuntimeError, match="cannot be called twice"):
        log.init(transports=fake_transports, environ={})


def test_invalid_configuration_installs_nothing(fake_transports: FakeTransports) -> None:
    with pytest.raises(MutuallyExclusiveOptionsError):
        log.init(options=log.Option.ODELAY | log.Option.NDELAY, transports=fake_transports, environ={})
    with pytest.raises(ConfigurationError):
        log.init(native="carrier-pigeon", transports=fake_transports, environ={})

    assert not log.is_initialised()


def test_environment_mask_is_applied(fake_transports: FakeTransports) -> None:
    session = log.init(transports=fake_transports, environ={"LOG_UPTO": "LOG_WARNING"})

    log.info("dropped")
    log.err("kept")

    assert isinstance(session.backend, SeverityFilter)
    assert fake_transports.native.messages == ["kept"]


@pytest.mark.parametrize(
    ("helper", "severity"),
    [
        ("emerg", log.Severity.EMERG),
        ("emergency", log.Severity.EMERG),
        ("alert", log.Severity.ALERT),
        ("crit", log.Severity.CRIT),
        ("critical", log.Severity.CRIT),
        ("err", log.Severity.ERR),
        ("error", log.Severity.ERR),
        ("warning", log.Severity.WARNING),
        ("warn", log.Severity.WARNING),
        ("notice", log.Severity.NOTICE),
        ("info", log.Severity.INFO),
        ("information", log.Severity.INFO),
        ("debug", log.Severity.DEBUG),
    ],
)
def test_severity_helpers(fake_transports: FakeTransports, helper: str, severity: log.Severity) -> None:
    log.init(transports=fake_transports, environ={})

    getattr(log, helper)("hello")

    priority, message = fake_transports.native.calls[0]
    assert priority.severity is severity
    assert message == "hello"


def test_posix_calls_delegate_to_default_session(fake_transports: FakeTransports) -> None:
    log.init(transports=fake_transports, environ={})

    log.openlog("reopened", log.Option.NDELAY | log.Option.NOFALLBACK, log.Facility.LOCAL3)
    log.set_severity_mask(log.SeverityMask.allowing(log.Severity.ALERT))
    log.syslog(log.Facility.LOCAL3 | log.Severity.ALERT, "wake up")
    log.syslog(log.Severity.INFO, "filtered")
    log.closelog()

    assert fake_transports.native.messages == ["wake up"]
    assert fake_transports.native.closed == 1


def test_shutdown_closes_and_clears(fake_transports: FakeTransports) -> None:
    log.init(options=log.Option.NDELAY, transports=fake_transports, environ={})

    log.shutdown()

    assert not log.is_initialised()
    assert fake_transports.native.closed == 1
    with pytest.raises(RuntimeError, match="without an active session"):
        log.shutdown()


def test_shutdown_clears_state_even_when_close_fails(fake_transports: FakeTransports) -> None:
    log.init(options=log.Option.NDELAY, transports=fake_transports, environ={})

    def fail() -> None:
        raise OSError("socket stuck")

    fake_transports.native.close = fail  # type: ignore[method-assign]

    with pytest.raises(OSError, match="socket stuck"):
        log.shutdown()

    assert not log.is_initialised()


def test_set_session_installs_custom_session(fake_transports: FakeTransports) -> None:
    session = log.create_session(transports=fake_transports)

    log.set_session(session)
    log.notice("custom")

    assert log.current_session() is session
    assert fake_transports.native.messages == ["custom"]


def test_diagnostic_hook_reaches_nowait_failures(fake_transports: FakeTransports) -> None:
    reports: list[tuple[str, dict[str, Any]]] = []
    fake_transports.native.fail_with = OSError("gone")
    log.init(
        options=log.Option.NOWAIT | log.Option.NOFALLBACK,
        diagnostic_hook=lambda name, payload: reports.append((name, payload)),
        transports=fake_transports,
        environ={},
    )

    log.err("lost")
    log.shutdown()

    assert [name for name, _ in reports] == ["nowait_delivery_failed"]


def test_init_routes_nowait_deliveries_through_injected_executor(
    fake_transports: FakeTransports, inline_executor: InlineExecutor
) -> None:
    log.init(
        options=log.Option.NOWAIT | log.Option.NOFALLBACK,
        nowait_executor=inline_executor,
        transports=fake_transports,
        environ={},
    )

    log.info("queued")

    assert inline_executor.submitted == 1
    assert fake_transports.native.messages == ["queued"]


def test_shared_nowait_pool_is_bounded() -> None:
    assert shared_executor()._max_workers == SHARED_MAX_WORKERS  # noqa: SLF001


def test_select_native_factory() -> None:
    assert select_native_factory("journald") == JournaldAdapter.open
    assert select_native_factory("syslog") == NativeSyslog.open


def test_summary_info_lists_metadata() -> None:
    summary = log.summary_info()

    assert summary.startswith("Info for lib_syslogger:")
    assert "shell_command" in summary
