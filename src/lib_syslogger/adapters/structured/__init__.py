"""Structured transports."""

from __future__ import annotations

from .journald import JournaldAdapter

__all__ = ["JournaldAdapter"]
