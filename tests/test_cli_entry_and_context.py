"""Behaviour tests for CLI entry point, context helpers, and edge cases."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import lib_cli_exit_tools
import pytest
import rich_click as click
from click.testing import CliRunner, Result
from lib_layered_config import Config

from tasklab.adapters import cli as cli_mod
from tasklab.adapters.cli.context import (
    CLIContext,
    apply_traceback_preferences,
    get_cli_context,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from tasklab.adapters.cli.main import main
from tasklab.composition import build_production, build_testing
from tasklab.domain.errors import ConfigurationError

# ---------------------------------------------------------------------------
# main() without a services_factory
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_main_raises_when_services_factory_is_none() -> None:
    """main() raises ValueError when services_factory is not provided."""
    with pytest.raises(ValueError, match="services_factory is required"):
        main(["--help"], services_factory=None)


@pytest.mark.os_agnostic
def test_main_handles_click_exception(managed_traceback_state: None) -> None:
    """ClickException from the root group becomes a non-zero exit code."""
    exit_code = main(["--set", "invalid_no_dot=value"], services_factory=build_production)

    assert exit_code != 0


# ---------------------------------------------------------------------------
# get_cli_context / store_cli_context
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_get_cli_context_raises_when_not_initialized() -> None:
    """RuntimeError raised when Click context has no CLIContext."""
    ctx = click.Context(click.Command("test"))
    ctx.obj = "not a CLIContext"

    with pytest.raises(RuntimeError, match="CLI context not initialized"):
        get_cli_context(ctx)


@pytest.mark.os_agnostic
def test_cli_root_raises_when_obj_not_callable(cli_runner: CliRunner) -> None:
    """The root group refuses an obj that is not a services factory."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj="not_callable")

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)


@pytest.mark.os_agnostic
def test_store_and_get_cli_context_round_trip() -> None:
    """Stored CLIContext is retrievable via get_cli_context."""
    ctx = click.Context(click.Command("test"))

    store_cli_context(
        ctx,
        traceback=True,
        config=Config({}, {}),
        services=build_testing(),
        profile="classroom",
        set_overrides=("tasklab.json_indent=true",),
    )
    result = get_cli_context(ctx)

    assert isinstance(result, CLIContext)
    assert result.traceback is True
    assert result.profile == "classroom"
    assert result.set_overrides == ("tasklab.json_indent=true",)


@pytest.mark.os_agnostic
def test_cli_context_settings_parse_the_tasklab_section() -> None:
    """CLIContext.settings exposes the typed [tasklab] section."""
    cli_ctx = CLIContext(
        traceback=False,
        config=Config({"tasklab": {"email_separator": "|"}}, {}),
        services=build_testing(),
    )

    assert cli_ctx.settings.email_separator == "|"


@pytest.mark.os_agnostic
def test_cli_context_settings_raise_configuration_error_for_bad_values() -> None:
    """An empty separator is reported as ConfigurationError."""
    cli_ctx = CLIContext(
        traceback=False,
        config=Config({"tasklab": {"email_separator": ""}}, {}),
        services=build_testing(),
    )

    with pytest.raises(ConfigurationError, match="email_separator"):
        _ = cli_ctx.settings


# ---------------------------------------------------------------------------
# Traceback snapshot/restore round-trip
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_traceback_snapshot_restore_round_trip(managed_traceback_state: None) -> None:
    """snapshot → mutate → restore returns to original state."""
    original = snapshot_traceback_state()

    apply_traceback_preferences(True)
    assert lib_cli_exit_tools.config.traceback is True

    restore_traceback_state(original)
    assert lib_cli_exit_tools.config.traceback == original[0]
    assert lib_cli_exit_tools.config.traceback_force_color == original[1]


# ---------------------------------------------------------------------------
# --profile propagation
# ---------------------------------------------------------------------------


@pytest.mark.os_agnostic
def test_root_profile_is_passed_to_get_config(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config_with_profile_capture: Callable[[Config, list[str | None]], Callable[[], Any]],
) -> None:
    """--profile on the root group reaches the config loader."""
    captured: list[str | None] = []
    factory = inject_config_with_profile_capture(config_factory({}), captured)

    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "classroom", "rot13", "a"], obj=factory)

    assert result.exit_code == 0
    assert captured == ["classroom"]
