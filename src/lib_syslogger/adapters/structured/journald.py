"""Journald transport sending records as structured journal fields.

Purpose
-------
Offer systemd-journald as an alternative native transport on Linux hosts.
Records keep their syslog identity through the ``SYSLOG_*`` fields, so
``journalctl -t <ident>`` and ``-p <severity>`` filters keep working.

Contents
--------
* :class:`JournaldAdapter` - :class:`SysloggerPort` calling ``systemd.journal.send``
  (or a supplied sender).

System Role
-----------
Selected instead of :class:`~lib_syslogger.adapters.transport.native.NativeSyslog`
when the ``LOG_NATIVE`` environment variable is ``journald``. When the
``systemd`` bindings are missing, :meth:`JournaldAdapter.open` raises
:class:`TransportError` and the chain degrades like any unreachable transport.
"""

from __future__ import annotations

import os
from typing import Any, Callable

from lib_syslogger.adapters._formatting import resolve_tag
from lib_syslogger.application.ports.backend import SysloggerPort
from lib_syslogger.domain.errors import TransportError
from lib_syslogger.domain.message import Message, MessageKind
from lib_syslogger.domain.priority import Facility, Priority, validate_facility

Sender = Callable[..., None]


def _load_sender() -> Sender:
    """Return :func:`systemd.journal.send`, raising if unavailable."""
    try:
        from systemd import journal
    except ImportError as exc:  # pragma: no cover - executed only when systemd missing
        raise TransportError("systemd.journal is not available; install the 'journald' extra") from exc
    return journal.send


class JournaldAdapter(SysloggerPort):
    """Emit records via ``systemd.journal.send``."""

    def __init__(
        self,
        *,
        sender: Sender,
        facility: int = Facility.USER,
        ident: str = "",
        process_id: int | None = None,
    ) -> None:
        validate_facility(int(facility))
        self._sender = sender
        self._facility = int(facility)
        self._ident = ident
        self._process_id = process_id

    @classmethod
    def open(cls, facility: int = Facility.USER, ident: str = "", *, sender: Sender | None = None) -> "JournaldAdapter":
        """Bind to the journal, importing ``systemd`` unless ``sender`` is given."""

        return cls(sender=sender or _load_sender(), facility=facility, ident=ident)

    def log(self, priority: Priority, message: Any) -> None:
        """Send ``message`` using the configured sender."""
        fields = self._build_fields(priority, message)
        try:
            self._sender(**fields)
        except OSError as exc:
            raise TransportError(f"journald rejected the record: {exc}") from exc

    def _build_fields(self, priority: Priority, message: Any) -> dict[str, Any]:
        """Construct a journald field dictionary.

        Examples
        --------
        >>> from lib_syslogger.domain.priority import Severity
        >>> adapter = JournaldAdapter(sender=lambda **fields: None, facility=Facility.DAEMON, ident="svc", process_id=7)
        >>> fields = adapter._build_fields(Priority(severity=Severity.ERR), "boom")
        >>> fields["MESSAGE"], fields["PRIORITY"], fields["SYSLOG_FACILITY"]
        ('boom', 3, 3)
        >>> fields["SYSLOG_IDENTIFIER"], fields["SYSLOG_PID"]
        ('svc', 7)
        """
        resolved = Message.of(message)
        effective = priority.with_default_facility(self._facility)
        fields: dict[str, Any] = {
            "MESSAGE": resolved.text,
            "PRIORITY": int(effective.severity),
            "SYSLOG_FACILITY": effective.facility >> 3,
            "SYSLOG_IDENTIFIER": resolve_tag(self._ident),
            "SYSLOG_PID": self._process_id or os.getpid(),
        }
        if resolved.kind is MessageKind.ERROR:
            fields["EXCEPTION_TYPE"] = type(resolved.payload).__name__
        return fields


__all__ = ["JournaldAdapter"]
