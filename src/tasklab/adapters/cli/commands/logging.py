"""Logging demonstration CLI command.

Contents:
    * :func:`cli_logdemo` - Preview lib_log_rich output for a theme.
"""

from __future__ import annotations

import rich_click as click

from ..constants import CLICK_CONTEXT_SETTINGS


@click.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--theme", default="classic", help="Logging theme to preview")
def cli_logdemo(theme: str) -> None:
    """Emit sample records of every level with the chosen THEME."""
    import lib_log_rich
    import lib_log_rich.runtime

    # logdemo() starts its own runtime.
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()

    result = lib_log_rich.logdemo(theme=theme)
    click.echo(f"\nLog demo completed (theme: {result.theme})")


__all__ = ["cli_logdemo"]
