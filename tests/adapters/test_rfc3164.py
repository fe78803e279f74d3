from __future__ import annotations

import pytest

from lib_syslogger.adapters.formatting.rfc3164 import MAX_RECORD_BYTES, Rfc3164
from lib_syslogger.domain.errors import InvalidFacilityError, MessageTooLongError, UnsupportedMessageError
from lib_syslogger.domain.priority import Facility, Priority, Severity
from tests.fakes import FixedClock, RecordingBackend
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


class _Job:
    def __str__(self) -> str:
        return "job #3"


def _formatter(sink: RecordingBackend, **kwargs: object) -> Rfc3164:
    options = {"ident": "app", "clock": FixedClock(), "hostname": "box"}
    options.update(kwargs)
    return Rfc3164(sink, **options)  # type: ignore[arg-type]


def test_record_layout_and_empty_priority(recorder: RecordingBackend) -> None:
    _formatter(recorder).log(Priority(Facility.LOCAL4, Severity.ERR), "disk full")

    assert recorder.calls == [(Priority(), "<163>Mar  7 09:05:01 box app: disk full")]


def test_pid_is_appended_only_when_requested(recorder: RecordingBackend) -> None:
    with_pid = _formatter(recorder, pid=True, process_id=4242)

    assert "app[4242]: " in with_pid.format(Priority(Facility.USER, Severity.INFO), "x")
    assert "[" not in _formatter(recorder).format(Priority(Facility.USER, Severity.INFO), "x")


def test_unset_facility_uses_configured_default(recorder: RecordingBackend) -> None:
    record = _formatter(recorder, facility=Facility.MAIL).format(Priority(severity=Severity.NOTICE), "m")

    assert record.startswith("<21>")


def test_unset_facility_without_default_uses_user(recorder: RecordingBackend) -> None:
    assert _formatter(recorder).format(Priority(severity=Severity.DEBUG), "m").startswith("<15>")


def test_renderables_and_errors_are_rendered(recorder: RecordingBackend) -> None:
    formatter = _formatter(recorder)

    assert formatter.format(Priority(Facility.USER, Severity.ERR), RuntimeError("boom")).endswith(": boom")
    assert formatter.format(Priority(Facility.USER, Severity.ERR), _Job()).endswith(": job #3")


def test_unsupported_message_is_rejected(recorder: RecordingBackend) -> None:
    with pytest.raises(UnsupportedMessageError):
        _formatter(recorder).log(Priority(Facility.USER, Severity.ERR), object())

    assert recorder.calls == []


@pytest.mark.parametrize(("extra", "accepted"), [(-1, True), (0, True), (1, False)])
def test_record_size_limit(recorder: RecordingBackend, extra: int, accepted: bool) -> None:
    formatter = _formatter(recorder)
    priority = Priority(Facility.USER, Severity.INFO)
    overhead = len(formatter.format(priority, "").encode("utf-8"))
    text = "x" * (MAX_RECORD_BYTES - overhead + extra)

    if accepted:
        formatter.log(priority, text)
        assert len(recorder.messages[0].encode("utf-8")) == MAX_RECORD_BYTES + extra
    else:
        with pytest.raises(MessageTooLongError):
            formatter.log(priority, text)
        assert recorder.calls == []


def test_size_limit_counts_utf8_bytes(recorder: RecordingBackend) -> None:
    formatter = _formatter(recorder)
    priority = Priority(Facility.USER, Severity.INFO)
    overhead = len(formatter.format(priority, "").encode("utf-8"))
    room = MAX_RECORD_BYTES - overhead

    with pytest.raises(MessageTooLongError):
        formatter.log(priority, "é" * (room // 2 + 1))


def test_invalid_facility_falls_back_to_configured(recorder: RecordingBackend) -> None:
    record = _formatter(recorder, facility=Facility.LOCAL0).format(Priority(0xC0, Severity.INFO), "m")

    assert record.startswith("<134>")


def test_invalid_configured_facility_is_reported(recorder: RecordingBackend) -> None:
    with pytest.raises(InvalidFacilityError):
        _formatter(recorder, facility=0xC0).format(Priority(severity=Severity.INFO), "m")
