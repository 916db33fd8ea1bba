"""Adapters layer - infrastructure and framework integrations.

Connects the pure exercises to configuration files, logging and the
command line.

Contents:
    * :mod:`.config` - Configuration loading, typed settings, and display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - rich-click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
