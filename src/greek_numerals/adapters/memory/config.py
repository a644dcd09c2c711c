"""Configuration doubles that never read files or the environment."""

from __future__ import annotations

import click
import orjson
from lib_layered_config import Config

from ...domain.enums import OutputFormat

#: Mirrors the ``[greek_numerals]`` table of ``defaultconfig.toml``.
FRESH_INSTALL: dict[str, object] = {"greek_numerals": {"case": "lower", "format": "human"}}


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the fresh-install configuration whatever profile is asked for."""
    return Config(FRESH_INSTALL, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Echo ``config`` (or one section of it) as a single line of sorted JSON.

    There is no provenance to show, so both formats print the same line.

    Raises:
        ValueError: If ``section`` is not a top-level key, as in production.
    """
    data = config.as_dict()
    if section is not None:
        if section not in data:
            raise ValueError(f"Section {section!r} not found in configuration")
        data = {section: data[section]}
    click.echo(orjson.dumps(data, option=orjson.OPT_SORT_KEYS).decode("utf-8"))


__all__ = ["FRESH_INSTALL", "display_config_in_memory", "get_config_in_memory"]
