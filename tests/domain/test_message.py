from __future__ import annotations

import pytest

from lib_syslogger.domain.errors import UnsupportedMessageError
from lib_syslogger.domain.message import Message, MessageKind
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


class _Renderable:
    def __str__(self) -> str:
        return "rendered"


def test_text_message() -> None:
    message = Message.of("hello")

    assert message.kind is MessageKind.TEXT
    assert message.text == "hello"


def test_renderable_message() -> None:
    message = Message.of(_Renderable())

    assert message.kind is MessageKind.RENDERABLE
    assert message.text == "rendered"


def test_error_message() -> None:
    message = Message.of(KeyError("missing"))

    assert message.kind is MessageKind.ERROR
    assert "missing" in message.text


def test_message_passthrough() -> None:
    original = Message.of("again")

    assert Message.of(original) is original


@pytest.mark.parametrize("payload", [object(), b"raw bytes", bytearray(b"x")])
def test_unsupported_payloads_are_rejected(payload: object) -> None:
    with pytest.raises(UnsupportedMessageError, match="message must be"):
        Message.of(payload)


def test_unsupported_message_is_a_type_error() -> None:
    assert issubclass(UnsupportedMessageError, TypeError)
