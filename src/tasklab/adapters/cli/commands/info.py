"""Basic CLI commands for metadata and the greeting template.

Contents:
    * :func:`cli_info` - Display package metadata.
    * :func:`cli_greet` - Print the templated greeting for a name.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from tasklab import __init__conf__
from tasklab.domain.strings import get_string_from_template

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("first_name")
@click.argument("last_name")
def cli_greet(first_name: str, last_name: str) -> None:
    """Print ``Hello, FIRST_NAME LAST_NAME!``."""
    with lib_log_rich.runtime.bind(job_id="cli-greet", extra={"command": "greet"}):
        logger.info("Building greeting")
        click.echo(get_string_from_template(first_name, last_name))


__all__ = ["cli_greet", "cli_info"]
