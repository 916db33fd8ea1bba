"""Parse and apply ``--set SECTION.KEY=VALUE`` CLI overrides to Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """A single parsed configuration override."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a ConfigOverride.

    The first ``=`` ends the dotted path, so values may contain ``=``
    themselves. The first dot ends the section name.

    Raises:
        ValueError: If ``=`` is missing, the path has no dot, or any path
            component is empty.

    Examples:
        >>> override = parse_override("tasklab.email_separator=,")
        >>> override.section, override.key_path, override.value
        ('tasklab', ('email_separator',), ',')

        >>> parse_override("tasklab.json_indent=true").value
        True

        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").key_path
        ('payload_limits', 'max_chars')
    """
    path_part, separator, value_str = raw.partition("=")
    if not separator:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    if "." not in path_part:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *key_parts = path_part.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(key_parts):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=tuple(key_parts), value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Interpret *raw* as JSON, falling back to the string itself.

    Examples:
        >>> coerce_value("false"), coerce_value("4"), coerce_value("null")
        (False, 4, None)
        >>> coerce_value(";")
        ';'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Write *override* into *target*, creating intermediate tables on the way.

    Raises:
        TypeError: If an intermediate key already holds a non-table value.

    Examples:
        >>> tables: dict[str, dict[str, object]] = {}
        >>> _nest_override(tables, ConfigOverride(section="tasklab", key_path=("json_indent",), value=True))
        >>> tables
        {'tasklab': {'json_indent': True}}
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        existing = node.setdefault(part, {})
        if not isinstance(existing, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(existing).__name__}")
        node = cast("dict[str, object]", existing)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Deep-merge ``--set`` overrides into *config*.

    Returns *config* itself when there is nothing to apply.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> from lib_layered_config import Config
        >>> cfg = Config({"tasklab": {"email_separator": ";"}}, {})
        >>> apply_overrides(cfg, ("tasklab.email_separator=,",))["tasklab"]["email_separator"]
        ','
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    overrides: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(overrides, parse_override(raw))

    return config.with_overrides(overrides)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "parse_override",
    "coerce_value",
    "apply_overrides",
]
