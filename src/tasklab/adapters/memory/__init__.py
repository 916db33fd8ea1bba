"""Port implementations that keep everything in memory.

``tasklab.composition.build_testing`` wires these in place of the file-backed
configuration loader and the lib_log_rich runtime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory, get_default_config_path_in_memory
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from tasklab.application.ports import DisplayConfig, GetConfig, GetDefaultConfigPath, InitLogging

    _conforms: tuple[GetConfig, GetDefaultConfigPath, DisplayConfig, InitLogging] = (
        get_config_in_memory,
        get_default_config_path_in_memory,
        display_config_in_memory,
        init_logging_in_memory,
    )

__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
]
