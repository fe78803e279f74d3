from __future__ import annotations

import io
import sys

import pytest

from lib_syslogger.adapters.transport.stream import DevConsole, Stderr, StreamWriter, WriteCloser
from lib_syslogger.domain.errors import PriorityNotAcceptedError, TransportError, UnsupportedMessageError
from lib_syslogger.domain.priority import Facility, Priority, Severity
from tests.os_markers import OS_AGNOSTIC, POSIX_ONLY

pytestmark = [OS_AGNOSTIC]


def test_stream_writer_writes_text() -> None:
    buffer = io.StringIO()

    StreamWriter(buffer).log(Priority(), "record\n")

    assert buffer.getvalue() == "record\n"


def test_stream_writer_writes_bytes_to_binary_stream() -> None:
    buffer = io.BytesIO()

    StreamWriter(buffer).log(Priority(), b"raw\n")

    assert buffer.getvalue() == b"raw\n"


def test_stream_writer_writes_bytes_through_text_buffer() -> None:
    raw = io.BytesIO()
    wrapper = io.TextIOWrapper(raw, encoding="utf-8")

    StreamWriter(wrapper).log(Priority(), b"raw\n")

    assert raw.getvalue() == b"raw\n"


def test_raw_sink_rejects_priority() -> None:
    with pytest.raises(PriorityNotAcceptedError):
        StreamWriter(io.StringIO()).log(Priority(Facility.USER, Severity.INFO), "x")


def test_raw_sink_rejects_non_text() -> None:
    with pytest.raises(UnsupportedMessageError):
        StreamWriter(io.StringIO()).log(Priority(), 42)


def test_closed_stream_surfaces_transport_error() -> None:
    buffer = io.StringIO()
    buffer.close()

    with pytest.raises(TransportError):
        StreamWriter(buffer).log(Priority(), "late")


def test_write_closer_closes_its_stream() -> None:
    buffer = io.StringIO()

    WriteCloser(buffer).close()

    assert buffer.closed


def test_stderr_resolves_stream_at_call_time(monkeypatch: pytest.MonkeyPatch) -> None:
    sink = Stderr()
    replacement = io.StringIO()
    monkeypatch.setattr(sys, "stderr", replacement)

    sink.log(Priority(), "late bound\n")

    assert replacement.getvalue() == "late bound\n"


def test_dev_console_uses_opener() -> None:
    buffer = io.StringIO()
    seen: list[str] = []

    def opener(path: str) -> io.StringIO:
        seen.append(path)
        return buffer

    console = DevConsole.open(opener=opener)
    console.log(Priority(), "to console\n")

    assert seen == ["/dev/console"]
    assert buffer.getvalue() == "to console\n"


def test_dev_console_failure_is_a_transport_error() -> None:
    def opener(path: str) -> io.StringIO:
        raise PermissionError(13, "Permission denied", path)

    with pytest.raises(TransportError, match="cannot open console device"):
        DevConsole.open(opener=opener)


@POSIX_ONLY
def test_dev_console_never_creates_missing_device(tmp_path) -> None:  # noqa: ANN001
    missing = tmp_path / "console"

    with pytest.raises(TransportError):
        DevConsole.open(str(missing))

    assert not missing.exists()


@POSIX_ONLY
def test_dev_console_appends_to_existing_file(tmp_path) -> None:  # noqa: ANN001
    target = tmp_path / "console"
    target.write_text("existing\n", encoding="utf-8")

    console = DevConsole.open(str(target))
    console.log(Priority(), "appended\n")
    console.close()

    assert target.read_text(encoding="utf-8") == "existing\nappended\n"
