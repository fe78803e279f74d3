"""Exception hierarchy raised by backends, wrappers, and the orchestrator.

Backends signal success by returning ``None`` and failure by raising. The
classes below let callers tell configuration mistakes (never partially applied)
apart from transport failures (recoverable by fallback) and message-shape
rejections (never retried by any wrapper).
"""

from __future__ import annotations


class SysloggerError(Exception):
    """Root of every error raised by :mod:`lib_syslogger`."""


class ConfigurationError(SysloggerError, ValueError):
    """Invalid configuration detected synchronously."""


class MutuallyExclusiveOptionsError(ConfigurationError):
    """``ODELAY`` and ``NDELAY`` were requested together."""


class InvalidFacilityError(ConfigurationError):
    """A facility outside the 24 known codes was supplied."""


class UnknownOptionError(ConfigurationError):
    """Option bits outside the known flags were supplied."""


class MissingFactoryError(ConfigurationError):
    """A deferred backend was created without a factory."""


class NoBackendError(ConfigurationError):
    """A wrapper was asked to log without any usable backend."""


class NoDeliveryMechanismError(SysloggerError):
    """The chain builder could not assemble any backend."""


class TransportError(SysloggerError, OSError):
    """Opening or writing to a transport failed."""


class UnsupportedMessageError(SysloggerError, TypeError):
    """A backend does not accept the shape of the supplied message."""


class MessageTooLongError(SysloggerError, ValueError):
    """A formatted record exceeds the wire format's size limit."""


class FacilityMismatchError(SysloggerError, ValueError):
    """An explicit facility differs from the one a transport was opened with."""


class PriorityNotAcceptedError(SysloggerError, ValueError):
    """A raw sink received a non-empty priority it cannot represent."""


__all__ = [
    "ConfigurationError",
    "FacilityMismatchError",
    "InvalidFacilityError",
    "MessageTooLongError",
    "MissingFactoryError",
    "MutuallyExclusiveOptionsError",
    "NoBackendError",
    "NoDeliveryMechanismError",
    "PriorityNotAcceptedError",
    "SysloggerError",
    "TransportError",
    "UnknownOptionError",
    "UnsupportedMessageError",
]
