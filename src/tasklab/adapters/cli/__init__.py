"""Click front end of tasklab: the ``cli`` group, ``main`` and traceback helpers."""

from __future__ import annotations

from .context import (
    TracebackState,
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .main import main
from .root import cli

__all__ = [
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
]
