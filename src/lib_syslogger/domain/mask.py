"""Severity mask deciding which messages are suppressed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .priority import Severity

_ALL_BITS = 0xFF


def _bits(severities: Iterable[Severity | int]) -> int:
    bits = 0
    for severity in severities:
        bits |= 1 << int(Severity(severity))
    return bits


@dataclass(slots=True, frozen=True)
class SeverityMask:
    """Bitset over the eight severities; a set bit means *suppressed*.

    Examples
    --------
    >>> mask = SeverityMask.up_to(Severity.WARNING)
    >>> mask.masked(Severity.ERR), mask.masked(Severity.NOTICE)
    (False, True)
    >>> SeverityMask.allow_all().masked(Severity.DEBUG)
    False
    """

    suppressed: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "suppressed", int(self.suppressed) & _ALL_BITS)

    @classmethod
    def allow_all(cls) -> "SeverityMask":
        return cls(0)

    @classmethod
    def up_to(cls, severity: Severity | int) -> "SeverityMask":
        """Allow ``severity`` and everything more urgent; suppress the rest."""

        allowed = (1 << (int(Severity(severity)) + 1)) - 1
        return cls(_ALL_BITS & ~allowed)

    @classmethod
    def allowing(cls, *severities: Severity | int) -> "SeverityMask":
        """Allow only the listed severities."""

        return cls(_ALL_BITS & ~_bits(severities))

    @classmethod
    def suppressing(cls, *severities: Severity | int) -> "SeverityMask":
        """Suppress only the listed severities."""

        return cls(_bits(severities))

    def masked(self, severity: Severity | int) -> bool:
        """Return ``True`` when messages of ``severity`` must be dropped."""

        value = int(severity)
        if value < 0 or value > Severity.DEBUG:
            return True
        return bool(self.suppressed & (1 << value))

    def __str__(self) -> str:
        allowed = [s.label for s in Severity if not self.masked(s)]
        return "|".join(allowed) if allowed else "<nothing>"


__all__ = ["SeverityMask"]
