"""Subcommands registered on the root group, one module per topic."""

from __future__ import annotations

from .config import cli_config
from .exercises import cli_card_id, cli_emails, cli_rectangle, cli_rot13
from .info import cli_greet, cli_info
from .logging import cli_logdemo
from .selector import cli_selector

__all__ = [
    "cli_card_id",
    "cli_config",
    "cli_emails",
    "cli_greet",
    "cli_info",
    "cli_logdemo",
    "cli_rectangle",
    "cli_rot13",
    "cli_selector",
]
