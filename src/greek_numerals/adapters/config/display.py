"""Print configuration for ``greek-numerals config``."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LayeredFormat
from lib_layered_config import display_config as render_layered_config
from rich.console import Console

from greek_numerals.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Render ``config`` with the provenance of every value.

    Buffered log records are written out first so they land above the dump
    instead of inside it. ``console`` lets tests capture the Rich output.

    Raises:
        ValueError: If ``section`` names no top-level table.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    render_layered_config(
        config,
        output_format=LayeredFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
