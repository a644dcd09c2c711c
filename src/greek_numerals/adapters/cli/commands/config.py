"""``greek-numerals config``: show the configuration ``convert`` runs with."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greek_numerals.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Annotated TOML with the source of every value, or JSON",
)
@click.option("--section", default=None, metavar="NAME", help="Show one table only, e.g. greek_numerals")
@click.option("--profile", default=None, metavar="NAME", help="Re-read configuration under this profile")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Display the merged configuration, root --set overrides included.

    Precedence: defaults -> app -> host -> user -> dotenv -> env -> --set
    """
    cli_ctx = get_cli_context(ctx)
    shown_profile = profile or cli_ctx.profile
    fmt = OutputFormat(output_format.lower())

    extra = {"command": "config", "format": fmt.value, "profile": shown_profile, "section": section}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=extra):
        logger.info("Displaying configuration")
        config = cli_ctx.config_for(profile)
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=shown_profile)
        except ValueError as exc:
            logger.error("Unknown configuration section", extra={"error": str(exc)})
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
