"""Composition root: the only place that picks concrete adapters.

``build_production`` reads real configuration files and starts lib_log_rich;
``build_testing`` swaps both for in-memory stand-ins. Either function is
passed to :func:`tasklab.adapters.cli.main.main` as the services factory.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..application.ports import DisplayConfig, GetConfig, GetDefaultConfigPath, InitLogging

    _production_conforms: tuple[GetConfig, GetDefaultConfigPath, DisplayConfig, InitLogging] = (
        get_config,
        get_default_config_path,
        display_config,
        init_logging,
    )


@dataclass(frozen=True, slots=True)
class AppServices:
    """The port implementations one CLI run works with."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    init_logging: InitLogging


ServicesFactory = Callable[[], AppServices]


def build_production() -> AppServices:
    return AppServices(get_config, get_default_config_path, display_config, init_logging)


def build_testing() -> AppServices:
    """Services that touch neither the filesystem nor the logging runtime."""
    from ..adapters.memory import (
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "AppServices",
    "ServicesFactory",
    "build_production",
    "build_testing",
    "get_config",
]
