"""The ``tasklab`` command group and its global options.

``--traceback``, ``--profile`` and ``--set`` are handled here once, before any
subcommand runs; the resulting configuration and services travel to the
subcommands in a :class:`~tasklab.adapters.cli.context.CLIContext`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from tasklab import __init__conf__
from tasklab.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from tasklab.composition import AppServices


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Read configuration for *profile* and merge the ``--set`` overrides into it.

    Raises:
        click.UsageError: If an override is malformed or tries to descend
            through a value that is not a table.
    """
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Show the full Python traceback when a command fails",
)
@click.option(
    "--profile",
    default=None,
    help="Read configuration from the named profile (e.g. 'classroom')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value for this run (repeatable)",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Prepare configuration, logging and services for the chosen subcommand."""
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = factory()

    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # Command modules import this package, so they are loaded after ``cli`` exists.
    from . import commands

    for name in commands.__all__:
        cli.add_command(getattr(commands, name))


_register_commands()


__all__ = ["cli"]
