"""``greek-numerals info``: installation metadata and the encodable range."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greek_numerals import __init__conf__
from greek_numerals.domain.numerals import GREEK_ZERO, MAX_VALUE, to_greek_lowercase

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Show package metadata and the range ``convert`` accepts."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()
        click.echo(f"\n    range = 0 ({GREEK_ZERO}) .. {MAX_VALUE:,}")
        click.echo(f"    largest numeral = {to_greek_lowercase(MAX_VALUE)}")


__all__ = ["cli_info"]
