"""Session settings captured by ``openlog``."""

from __future__ import annotations

from dataclasses import dataclass

from .options import Option
from .priority import Facility


@dataclass(slots=True, frozen=True)
class SessionSettings:
    """Identity, options, and default facility of one logging session.

    Examples
    --------
    >>> settings = SessionSettings(ident="cron", options=Option.PID)
    >>> settings.has(Option.PID), settings.has(Option.CONS)
    (True, False)
    >>> SessionSettings().facility == Facility.USER
    True
    """

    ident: str = ""
    options: Option = Option(0)
    facility: int = Facility.USER

    def has(self, option: Option) -> bool:
        return bool(self.options & option)


__all__ = ["SessionSettings"]
