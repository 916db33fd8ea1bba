"""CLI commands exposing the string and shape exercises.

Contents:
    * :func:`cli_rot13` - ROT13-encode a text.
    * :func:`cli_card_id` - Look up a card in the initial deck.
    * :func:`cli_emails` - Split an address list.
    * :func:`cli_rectangle` - Draw a rectangle, print its area or its JSON.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from tasklab.adapters.config.settings import TasklabConfigModel
from tasklab.domain.errors import ConfigurationError
from tasklab.domain.serialization import get_json
from tasklab.domain.shapes import Rectangle
from tasklab.domain.strings import encode_to_rot13, extract_emails, get_card_id, get_rectangle_string

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _require_settings(cli_ctx: CLIContext) -> TasklabConfigModel:
    """Return typed settings or exit with CONFIG_ERROR."""
    try:
        return cli_ctx.settings
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


@click.command("rot13", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
def cli_rot13(text: str) -> None:
    """Print TEXT with every ASCII letter rotated by 13 places."""
    with lib_log_rich.runtime.bind(job_id="cli-rot13", extra={"command": "rot13"}):
        logger.info("Encoding text", extra={"length": len(text)})
        click.echo(encode_to_rot13(text))


@click.command("card-id", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("card")
def cli_card_id(card: str) -> None:
    """Print the zero-based deck position of CARD (e.g. 'A♣'), or -1."""
    with lib_log_rich.runtime.bind(job_id="cli-card-id", extra={"command": "card-id"}):
        index = get_card_id(card)
        logger.info("Looked up card", extra={"card": card, "index": index})
        click.echo(str(index))


@click.command("emails", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
@click.pass_context
def cli_emails(ctx: click.Context, text: str) -> None:
    """Print each address of TEXT on its own line.

    Addresses are split on ``tasklab.email_separator`` (default ``;``).
    """
    settings = _require_settings(get_cli_context(ctx))
    with lib_log_rich.runtime.bind(job_id="cli-emails", extra={"command": "emails"}):
        addresses = extract_emails(text, settings.email_separator)
        logger.info("Extracted addresses", extra={"count": len(addresses)})
        for address in addresses:
            click.echo(address)


@click.command("rectangle", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("width", type=click.IntRange(min=0))
@click.argument("height", type=click.IntRange(min=0))
@click.option("--area", is_flag=True, default=False, help="Print the area instead of drawing")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the rectangle as JSON")
@click.pass_context
def cli_rectangle(ctx: click.Context, width: int, height: int, area: bool, as_json: bool) -> None:
    """Draw a WIDTH x HEIGHT box with box-drawing characters."""
    if area and as_json:
        raise click.UsageError("--area and --json are mutually exclusive")

    rectangle = Rectangle(width, height)
    with lib_log_rich.runtime.bind(job_id="cli-rectangle", extra={"command": "rectangle"}):
        logger.info("Rendering rectangle", extra={"width": width, "height": height})
        if area:
            click.echo(str(rectangle.get_area()))
        elif as_json:
            settings = _require_settings(get_cli_context(ctx))
            click.echo(get_json(rectangle, sort_keys=settings.json_sort_keys, indent=settings.json_indent))
        else:
            click.echo(get_rectangle_string(width, height), nl=False)


__all__ = ["cli_card_id", "cli_emails", "cli_rectangle", "cli_rot13"]
