"""lib_log_rich integration.

Contents:
    * :class:`.setup.LoggingConfigModel` - the ``[lib_log_rich]`` section
    * :func:`.setup.init_logging` - start the runtime once per process
"""

from __future__ import annotations

from .setup import LoggingConfigModel, init_logging

__all__ = ["LoggingConfigModel", "init_logging"]
