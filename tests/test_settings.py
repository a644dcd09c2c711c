"""Numeral settings: validation of the ``[greek_numerals]`` section."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config
from pydantic import ValidationError

from greek_numerals.adapters.config.settings import NumeralSettings, load_numeral_settings
from greek_numerals.domain.enums import Case, OutputFormat
from greek_numerals.domain.errors import ConfigurationError


@pytest.mark.os_agnostic
def test_missing_section_yields_defaults(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """No section means lowercase human output."""
    settings = load_numeral_settings(config_factory({}))

    assert settings.case is Case.LOWER
    assert settings.output_format is OutputFormat.HUMAN


@pytest.mark.os_agnostic
def test_section_values_are_parsed(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """TOML ``format`` populates ``output_format``."""
    config = config_factory({"greek_numerals": {"case": "upper", "format": "json"}})

    settings = load_numeral_settings(config)

    assert settings.case is Case.UPPER
    assert settings.output_format is OutputFormat.JSON


@pytest.mark.os_agnostic
def test_values_are_case_insensitive_and_trimmed(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Environment overrides often arrive as ``UPPER`` or with stray spaces."""
    config = config_factory({"greek_numerals": {"case": " UPPER ", "format": "Json"}})

    settings = load_numeral_settings(config)

    assert settings.case is Case.UPPER
    assert settings.output_format is OutputFormat.JSON


@pytest.mark.os_agnostic
def test_invalid_case_raises_configuration_error(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """An unknown case value names the offending field."""
    config = config_factory({"greek_numerals": {"case": "title"}})

    with pytest.raises(ConfigurationError, match="case"):
        load_numeral_settings(config)


@pytest.mark.os_agnostic
def test_unknown_key_raises_configuration_error(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Typos in key names are reported instead of silently ignored."""
    config = config_factory({"greek_numerals": {"cases": "upper"}})

    with pytest.raises(ConfigurationError, match="cases"):
        load_numeral_settings(config)


@pytest.mark.os_agnostic
def test_non_table_section_raises_configuration_error(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """A scalar where the table belongs is rejected."""
    config = config_factory({"greek_numerals": "upper"})

    with pytest.raises(ConfigurationError, match="must be a table"):
        load_numeral_settings(config)


@pytest.mark.os_agnostic
def test_settings_model_is_frozen() -> None:
    """Settings cannot be mutated after validation."""
    settings = NumeralSettings()

    with pytest.raises(ValidationError):
        settings.case = Case.UPPER  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_settings_accept_field_name_as_well_as_alias() -> None:
    """``output_format`` and ``format`` both populate the same field."""
    assert NumeralSettings(output_format=OutputFormat.JSON).output_format is OutputFormat.JSON
    assert NumeralSettings.model_validate({"format": "json"}).output_format is OutputFormat.JSON
