"""CLI stories for the rot13, card-id, emails and rectangle commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result

from tasklab.adapters import cli as cli_mod

# ======================== rot13 ========================


@pytest.mark.os_agnostic
def test_rot13_prints_the_encoded_text(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["rot13", "Why did the chicken cross the road?"], obj=production_factory)

    assert result.exit_code == 0
    assert result.stdout == "Jul qvq gur puvpxra pebff gur ebnq?\n"


@pytest.mark.os_agnostic
def test_rot13_requires_text(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["rot13"], obj=production_factory)

    assert result.exit_code == 2
    assert "Missing argument" in result.output


# ======================== card-id ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(("card", "expected"), [("A♣", "0"), ("Q♠", "50"), ("K♠", "51"), ("Z♣", "-1")])
def test_card_id_prints_the_deck_position(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    card: str,
    expected: str,
) -> None:
    """Unknown cards print -1 and still succeed."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["card-id", card], obj=production_factory)

    assert result.exit_code == 0
    assert result.stdout.strip() == expected


# ======================== emails ========================


@pytest.mark.os_agnostic
def test_emails_splits_on_the_default_separator(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["emails", "angus.young@gmail.com;brian.johnson@hotmail.com"], obj=production_factory
    )

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["angus.young@gmail.com", "brian.johnson@hotmail.com"]


@pytest.mark.os_agnostic
def test_emails_uses_the_configured_separator(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"tasklab": {"email_separator": " | "}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["emails", "a@x.io | b@y.io | c@z.io"], obj=factory)

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["a@x.io", "b@y.io", "c@z.io"]


@pytest.mark.os_agnostic
def test_emails_with_invalid_configuration_exits_with_config_error(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"tasklab": {"email_separator": ""}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["emails", "a@x.io"], obj=factory)

    assert result.exit_code == 78
    assert "Invalid [tasklab] configuration" in result.stderr


# ======================== rectangle ========================


@pytest.mark.os_agnostic
def test_rectangle_draws_a_box(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["rectangle", "6", "4"], obj=production_factory)

    assert result.exit_code == 0
    assert result.stdout == "┌────┐\n│    │\n│    │\n└────┘\n"


@pytest.mark.os_agnostic
def test_rectangle_area(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["rectangle", "10", "20", "--area"], obj=production_factory)

    assert result.exit_code == 0
    assert result.stdout.strip() == "200"


@pytest.mark.os_agnostic
def test_rectangle_json_is_compact_by_default(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"tasklab": {}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["rectangle", "10", "20", "--json"], obj=factory)

    assert result.exit_code == 0
    assert result.stdout == '{"width":10,"height":20}\n'


@pytest.mark.os_agnostic
def test_rectangle_json_honours_sort_keys(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"tasklab": {"json_sort_keys": True}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["rectangle", "10", "20", "--json"], obj=factory)

    assert result.exit_code == 0
    assert result.stdout == '{"height":20,"width":10}\n'


@pytest.mark.os_agnostic
def test_rectangle_area_and_json_are_mutually_exclusive(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["rectangle", "2", "2", "--area", "--json"], obj=production_factory
    )

    assert result.exit_code == 2
    assert "mutually exclusive" in result.output


@pytest.mark.os_agnostic
def test_rectangle_rejects_non_numeric_sizes(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["rectangle", "wide", "2"], obj=production_factory)

    assert result.exit_code == 2


@pytest.mark.os_agnostic
def test_rectangle_with_zero_height_prints_nothing(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["rectangle", "4", "0"], obj=production_factory)

    assert result.exit_code == 0
    assert result.stdout == ""
