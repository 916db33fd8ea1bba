"""Fixtures shared by the CLI, module-entry and domain tests."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields, replace
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from tasklab.composition import AppServices

    ServicesFactory = Callable[[], AppServices]

_ANSI = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


def _services_reading(get_config: Callable[..., Config]) -> ServicesFactory:
    """Production services whose only fake is the configuration source."""
    from tasklab.adapters.config import loader
    from tasklab.composition import build_production

    loader.get_config.cache_clear()
    services = replace(build_production(), get_config=get_config)
    return lambda: services


@pytest.fixture
def cli_runner() -> CliRunner:
    """A fresh runner; read ``result.stdout`` so log lines on stderr stay out of the way."""
    return CliRunner()


@pytest.fixture
def production_factory() -> ServicesFactory:
    from tasklab.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    return lambda text: _ANSI.sub("", text)


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start from traceback flags switched off and put the previous flags back afterwards."""
    names = [field.name for field in fields(type(lib_cli_exit_tools.config))]
    saved = {name: getattr(lib_cli_exit_tools.config, name) for name in names}
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    try:
        yield
    finally:
        for name, value in saved.items():
            setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build a Config from a plain dict, with no files involved."""
    return lambda data: Config(data, {})


@pytest.fixture
def inject_config() -> Callable[[Config], ServicesFactory]:
    """Serve a fixed Config; display and logging stay real."""

    def _inject(config: Config) -> ServicesFactory:
        return _services_reading(lambda **_kwargs: config)

    return _inject


@pytest.fixture
def config_cli_context(
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config: Callable[[Config], ServicesFactory],
) -> Callable[[dict[str, Any]], ServicesFactory]:
    """Shortcut for ``inject_config(config_factory(data))``.

    Example:
        factory = config_cli_context({"tasklab": {"email_separator": ","}})
        result = cli_runner.invoke(cli, ["emails", "a@x,b@y"], obj=factory)
    """
    return lambda data: inject_config(config_factory(data))


@pytest.fixture
def inject_config_with_profile_capture() -> Callable[[Config, list[str | None]], ServicesFactory]:
    """Like ``inject_config``, but every requested profile is appended to a list."""

    def _inject(config: Config, captured_profiles: list[str | None]) -> ServicesFactory:
        def _get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        return _services_reading(_get_config)

    return _inject
