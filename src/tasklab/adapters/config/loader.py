"""Read tasklab's layered configuration through lib_layered_config.

Layers merge in the order defaults -> app -> host -> user -> dotenv -> env,
where the defaults are the ``defaultconfig.toml`` next to this module. A
profile moves every file layer into its ``profile/<name>/`` subdirectory.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from tasklab import __init__conf__

_DEFAULT_CONFIG_PATH = Path(__file__).with_name("defaultconfig.toml")


def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml``.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return _DEFAULT_CONFIG_PATH


# The CLI process is short-lived, so cached layers never go stale.
@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=_DEFAULT_CONFIG_PATH,
        start_dir=start_dir,
    )


def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration, reading files once per argument pair.

    Args:
        profile: Optional profile name such as ``'classroom'``.
        start_dir: Where ``.env`` discovery starts; the working directory
            when omitted.

    Raises:
        ValueError: If *profile* is unusable as a directory name (too long,
            reserved, or attempting path traversal).

    Example:
        >>> get_config().get("tasklab.email_separator", default=";")
        ';'
    """
    if profile is not None:
        validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)
    return _read_layers(profile, start_dir)


get_config.cache_clear = _read_layers.cache_clear  # type: ignore[attr-defined]


__all__ = [
    "get_config",
    "get_default_config_path",
]
