"""Configuration adapter - loading, typed settings, display, and overrides.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.settings` - Pydantic model for the ``[tasklab]`` section
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .settings import TasklabConfigModel, load_tasklab_settings

__all__ = [
    "TasklabConfigModel",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_tasklab_settings",
]
