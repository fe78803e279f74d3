"""Use cases: chain assembly, resource release, and the session orchestrator."""

from __future__ import annotations

from .build_chain import build_chain
from .posixish import Posixish
from .shutdown import release_resources

__all__ = ["Posixish", "build_chain", "release_resources"]
