"""Closed tagged union over the message shapes a backend may receive.

Purpose
-------
Callers hand the orchestrator plain strings, objects with their own textual
rendering, or exceptions. Instead of re-inspecting the payload in every
wrapper, backends that need text resolve it once through :meth:`Message.of`.

Contents
--------
* :class:`MessageKind` - the three accepted shapes.
* :class:`Message` - immutable carrier exposing the rendered :attr:`text`.

System Role
-----------
Wrappers (filter, fallthrough, broadcast, no-wait, delay) pass the raw payload
through untouched; only formatting and transport adapters call
:meth:`Message.of`, so an unsupported shape is reported by the first backend
that actually needs the text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import UnsupportedMessageError


class MessageKind(Enum):
    TEXT = "text"
    RENDERABLE = "renderable"
    ERROR = "error"


def _defines_str(value: Any) -> bool:
    return type(value).__str__ is not object.__str__


@dataclass(slots=True, frozen=True)
class Message:
    """A message payload tagged with its shape.

    Examples
    --------
    >>> Message.of("disk full").kind is MessageKind.TEXT
    True
    >>> Message.of(ValueError("bad input")).text
    'bad input'
    >>> Message.of(object())
    Traceback (most recent call last):
    ...
    lib_syslogger.domain.errors.UnsupportedMessageError: message must be a str, an object defining __str__, or an exception; got object
    """

    kind: MessageKind
    payload: Any

    @classmethod
    def of(cls, value: Any) -> "Message":
        """Classify ``value`` or raise :class:`UnsupportedMessageError`."""

        if isinstance(value, Message):
            return value
        if isinstance(value, str):
            return cls(MessageKind.TEXT, value)
        if isinstance(value, BaseException):
            return cls(MessageKind.ERROR, value)
        if not isinstance(value, (bytes, bytearray)) and _defines_str(value):
            return cls(MessageKind.RENDERABLE, value)
        raise UnsupportedMessageError(
            "message must be a str, an object defining __str__, or an exception; " f"got {type(value).__name__}",
        )

    @property
    def text(self) -> str:
        """Return the textual rendering of the payload."""

        if self.kind is MessageKind.TEXT:
            return self.payload
        return str(self.payload)


__all__ = ["Message", "MessageKind"]
