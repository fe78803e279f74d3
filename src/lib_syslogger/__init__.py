"""POSIX-style syslog sessions built from composable backends.

Most applications only need the runtime façade::

    import lib_syslogger as log

    log.init(ident="backup", options=log.Option.PID)
    log.warning("disk almost full")
    log.shutdown()

Custom chains compose the wrappers (:class:`Fallthrough`, :class:`Multi`,
:class:`NoWait`, :class:`Delay`, :class:`SeverityFilter`) around the adapters
(:class:`NativeSyslog`, :class:`Rfc3164`, :class:`StreamWriter`, ...).
"""

from __future__ import annotations

from .adapters import (
    DevConsole,
    HumanReadable,
    JournaldAdapter,
    NativeSyslog,
    Newliner,
    Rfc3164,
    Rfc5424,
    RichConsoleAdapter,
    Stderr,
    StreamWriter,
    SystemTransports,
    WriteCloser,
)
from .application.locking import ReadWriteLock
from .application.ports import ClosablePort, SysloggerPort
from .application.use_cases import Posixish
from .application.wrappers import Delay, Fallthrough, Multi, NoWait, SeverityFilter
from .domain import (
    ConfigurationError,
    Facility,
    FacilityMismatchError,
    InvalidFacilityError,
    Message,
    MessageKind,
    MessageTooLongError,
    MissingFactoryError,
    MutuallyExclusiveOptionsError,
    NoBackendError,
    NoDeliveryMechanismError,
    Option,
    Priority,
    PriorityNotAcceptedError,
    Severity,
    SeverityMask,
    SysloggerError,
    TransportError,
    UnknownOptionError,
    UnsupportedMessageError,
)
from .runtime import (
    alert,
    clear_session,
    closelog,
    create_session,
    crit,
    critical,
    current_session,
    debug,
    emerg,
    emergency,
    err,
    error,
    info,
    information,
    init,
    is_initialised,
    notice,
    openlog,
    set_session,
    set_severity_mask,
    shutdown,
    summary_info,
    syslog,
    warn,
    warning,
)

__all__ = [
    "ClosablePort",
    "ConfigurationError",
    "Delay",
    "DevConsole",
    "Facility",
    "FacilityMismatchError",
    "Fallthrough",
    "HumanReadable",
    "InvalidFacilityError",
    "JournaldAdapter",
    "Message",
    "MessageKind",
    "MessageTooLongError",
    "MissingFactoryError",
    "Multi",
    "MutuallyExclusiveOptionsError",
    "NativeSyslog",
    "Newliner",
    "NoBackendError",
    "NoDeliveryMechanismError",
    "NoWait",
    "Option",
    "Posixish",
    "Priority",
    "PriorityNotAcceptedError",
    "ReadWriteLock",
    "Rfc3164",
    "Rfc5424",
    "RichConsoleAdapter",
    "Severity",
    "SeverityFilter",
    "SeverityMask",
    "Stderr",
    "StreamWriter",
    "SysloggerError",
    "SysloggerPort",
    "SystemTransports",
    "TransportError",
    "UnknownOptionError",
    "UnsupportedMessageError",
    "WriteCloser",
    "alert",
    "clear_session",
    "closelog",
    "create_session",
    "crit",
    "critical",
    "current_session",
    "debug",
    "emerg",
    "emergency",
    "err",
    "error",
    "info",
    "information",
    "init",
    "is_initialised",
    "notice",
    "openlog",
    "set_session",
    "set_severity_mask",
    "shutdown",
    "summary_info",
    "syslog",
    "warn",
    "warning",
]
