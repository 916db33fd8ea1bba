"""State shared between the root group and its subcommands.

The root group turns the services factory it receives in ``ctx.obj`` into a
:class:`CLIContext`; subcommands read it back with :func:`get_cli_context`.
The traceback helpers keep ``lib_cli_exit_tools.config`` in step with the
``--traceback`` flag.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from tasklab.adapters.config.settings import TasklabConfigModel, load_tasklab_settings

if TYPE_CHECKING:
    from tasklab.composition import AppServices


class TracebackState(NamedTuple):
    """Snapshot of the two lib_cli_exit_tools traceback flags."""

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """Resolved configuration and services for one CLI invocation.

    ``set_overrides`` keeps the raw ``--set`` strings so a subcommand that
    reloads configuration for another profile can apply them again.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    @property
    def settings(self) -> TasklabConfigModel:
        """The ``[tasklab]`` section, validated.

        Raises:
            ConfigurationError: If the section holds invalid values.
        """
        return load_tasklab_settings(self.config)


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Swap the services factory in ``ctx.obj`` for a :class:`CLIContext`.

    Example:
        >>> from unittest.mock import MagicMock
        >>> from tasklab.composition import build_testing
        >>> ctx = MagicMock()
        >>> store_cli_context(ctx, traceback=False, config=MagicMock(), services=build_testing(), profile="classroom")
        >>> ctx.obj.profile
        'classroom'
    """
    ctx.obj = CLIContext(traceback, config, services, profile, set_overrides)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root group.

    Raises:
        RuntimeError: If ``ctx.obj`` holds anything else.
    """
    cli_ctx = ctx.obj
    if isinstance(cli_ctx, CLIContext):
        return cli_ctx
    raise RuntimeError("CLI context not initialized. Call store_cli_context first.")


def snapshot_traceback_state() -> TracebackState:
    config = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(config, "traceback", False)),
        force_color=bool(getattr(config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Put back flags captured by :func:`snapshot_traceback_state`.

    Example:
        >>> before = snapshot_traceback_state()
        >>> apply_traceback_preferences(True)
        >>> restore_traceback_state(before)
        >>> snapshot_traceback_state() == before
        True
    """
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, colored tracebacks on or off together."""
    restore_traceback_state(TracebackState(bool(enabled), bool(enabled)))


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
