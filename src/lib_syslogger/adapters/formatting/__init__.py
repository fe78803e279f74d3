"""Adapters rendering priority and message into a textual record."""

from __future__ import annotations

from .human_readable import HumanReadable
from .newliner import Newliner
from .rfc3164 import Rfc3164
from .rfc5424 import Rfc5424

__all__ = ["HumanReadable", "Newliner", "Rfc3164", "Rfc5424"]
