"""Integration tests for the config display wrapper.

The wrapper flushes pending log records and delegates to
lib_layered_config's display_config.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

from greek_numerals.adapters.config.display import display_config
from greek_numerals.domain.enums import OutputFormat


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", [OutputFormat.HUMAN, OutputFormat.JSON])
def test_display_config_raises_for_nonexistent_section(
    config_factory: Callable[[dict[str, Any]], Config],
    output_format: OutputFormat,
) -> None:
    """Requesting a section that doesn't exist must raise ValueError."""
    config = config_factory({"greek_numerals": {"case": "lower"}})

    with pytest.raises(ValueError, match="not found"):
        display_config(config, output_format=output_format, section="nonexistent")


@pytest.mark.os_agnostic
def test_display_human_renders_numeral_section(capsys: pytest.CaptureFixture[str]) -> None:
    """Human output is TOML-like with a section header."""
    config = Config({"greek_numerals": {"case": "upper", "format": "human"}}, {})

    display_config(config, output_format=OutputFormat.HUMAN)

    output = capsys.readouterr().out
    assert "[greek_numerals]" in output
    assert 'case = "upper"' in output


@pytest.mark.os_agnostic
def test_display_json_renders_numeral_section(capsys: pytest.CaptureFixture[str]) -> None:
    """JSON output carries section and key names."""
    config = Config({"greek_numerals": {"case": "lower"}}, {})

    display_config(config, output_format=OutputFormat.JSON, section="greek_numerals")

    output = capsys.readouterr().out
    assert '"case": "lower"' in output


@pytest.mark.os_agnostic
def test_display_human_renders_profile_in_provenance(capsys: pytest.CaptureFixture[str]) -> None:
    """Profile name must pass through to lib_layered_config."""
    metadata: dict[str, SourceInfo] = {
        "greek_numerals.case": {
            "layer": "user",
            "path": "/home/user/.config/greek-numerals/config.toml",
            "key": "greek_numerals.case",
        },
    }
    config = Config({"greek_numerals": {"case": "upper"}}, metadata)

    display_config(config, output_format=OutputFormat.HUMAN, profile="production")

    output = capsys.readouterr().out
    assert "# layer:user profile:production" in output
