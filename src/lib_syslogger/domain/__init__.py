"""Domain values and errors used by the logging backends."""

from __future__ import annotations

from .errors import (
    ConfigurationError,
    FacilityMismatchError,
    InvalidFacilityError,
    MessageTooLongError,
    MissingFactoryError,
    MutuallyExclusiveOptionsError,
    NoBackendError,
    NoDeliveryMechanismError,
    PriorityNotAcceptedError,
    SysloggerError,
    TransportError,
    UnknownOptionError,
    UnsupportedMessageError,
)
from .mask import SeverityMask
from .message import Message, MessageKind
from .options import Option, validate_options
from .palettes import CONSOLE_STYLE_THEMES, resolve_theme
from .priority import Facility, Priority, Severity, coerce_priority, validate_facility
from .settings import SessionSettings

__all__ = [
    "CONSOLE_STYLE_THEMES",
    "ConfigurationError",
    "Facility",
    "FacilityMismatchError",
    "InvalidFacilityError",
    "Message",
    "MessageKind",
    "MessageTooLongError",
    "MissingFactoryError",
    "MutuallyExclusiveOptionsError",
    "NoBackendError",
    "NoDeliveryMechanismError",
    "Option",
    "Priority",
    "PriorityNotAcceptedError",
    "Severity",
    "SessionSettings",
    "SeverityMask",
    "SysloggerError",
    "TransportError",
    "UnknownOptionError",
    "UnsupportedMessageError",
    "coerce_priority",
    "resolve_theme",
    "validate_facility",
    "validate_options",
]
