"""Shared pytest fixtures for CLI and module-entry tests.

All shared fixtures live here and are picked up through pytest's conftest
discovery. Service factories replace only the I/O boundary they name and
keep every other port on its production adapter.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from greek_numerals.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for local test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for numerals and JSON: log records go to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests.

    Example:
        def test_info(cli_runner: CliRunner, production_factory: Callable[[], AppServices]) -> None:
            result = cli_runner.invoke(cli, ["info"], obj=production_factory)
            assert result.exit_code == 0
    """
    from greek_numerals.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start with tracebacks off and put every lib_cli_exit_tools setting back afterwards."""
    with lib_cli_exit_tools.config_overrides(traceback=False, traceback_force_color=False):
        yield


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before each test.

    Only clears before, not after, because a monkeypatched loader loses its
    ``cache_clear`` attribute.
    """
    from greek_numerals.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts.

    Example:
        def test_case(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"greek_numerals": {"case": "upper"}})
            assert config.get("greek_numerals.case") == "upper"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that provides production services with an injected Config.

    Only the I/O boundary (``get_config``) is replaced; settings parsing,
    display, and logging stay real.

    Example:
        def test_upper_default(cli_runner, config_factory, inject_config) -> None:
            factory = inject_config(config_factory({"greek_numerals": {"case": "upper"}}))
            result = cli_runner.invoke(cli, ["convert", "5"], obj=factory)
            assert result.stdout == "Εʹ\\n"
    """
    from greek_numerals.composition import build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = replace(build_production(), get_config=_fake_get_config)
        return lambda: test_services

    return _inject


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records every profile it receives."""
    from greek_numerals.composition import build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        test_services = replace(build_production(), get_config=_capturing_get_config)
        return lambda: test_services

    return _inject


@pytest.fixture
def inject_test_services() -> Callable[[], Callable[[], AppServices]]:
    """Return the build_testing factory for full in-memory testing."""
    from greek_numerals.composition import build_testing

    def _inject() -> Callable[[], AppServices]:
        return build_testing

    return _inject


@pytest.fixture
def config_cli_context(
    inject_config: Callable[[Config], Callable[[], AppServices]],
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Create a services factory straight from a config dict.

    Example:
        def test_config_display(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"section": {"key": "value"}})
            result = cli_runner.invoke(cli, ["config"], obj=factory)
            assert "key" in result.output
    """

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        return inject_config(Config(config_data, {}))

    return _create
