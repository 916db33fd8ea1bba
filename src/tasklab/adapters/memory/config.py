"""Configuration ports served from a constant, with nothing read or printed."""

from __future__ import annotations

from pathlib import Path

from lib_layered_config import Config

from ...domain.enums import OutputFormat

#: Mirrors the ``[tasklab]`` table of the bundled defaultconfig.toml.
DEFAULT_TASKLAB_SECTION = {"email_separator": ";", "json_sort_keys": False, "json_indent": False}


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    return Config({"tasklab": dict(DEFAULT_TASKLAB_SECTION)}, {})


def get_default_config_path_in_memory() -> Path:
    """A path that is never opened."""
    return Path("/nonexistent/tasklab/defaultconfig.toml")


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    return None


__all__ = [
    "DEFAULT_TASKLAB_SECTION",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]
