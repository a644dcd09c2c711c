"""The ``greek-numerals`` command group.

The group callback turns the services factory in ``ctx.obj`` into a
:class:`~.context.CLIContext`: configuration is read once, ``--set`` is
applied, and logging starts before any subcommand runs. Subcommands are
attached in the package ``__init__``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import rich_click as click

from greek_numerals import __init__conf__
from greek_numerals.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, apply_traceback_preferences

if TYPE_CHECKING:
    from lib_layered_config import Config

    from greek_numerals.composition import AppServices


def _services_from(factory: object) -> AppServices:
    if not callable(factory):
        raise RuntimeError("greek-numerals needs a services factory in obj, e.g. obj=build_production")
    build: Callable[[], AppServices] = factory  # type: ignore[assignment]
    return build()


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Read configuration for ``profile``; a malformed ``--set`` is a usage error."""
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--set'") from exc


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    __init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message="%(prog)s version %(version)s",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback when a command fails")
@click.option("--profile", default=None, metavar="NAME", help="Read configuration from profile/NAME/ in every layer")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one setting for this run, e.g. greek_numerals.case=upper (repeatable)",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Resolve configuration and services for the subcommand.

    Example:
        >>> from click.testing import CliRunner
        >>> from greek_numerals.composition import build_testing
        >>> CliRunner().invoke(cli, ["convert", "241"], obj=build_testing).stdout
        'σμαʹ\\n'
    """
    services = _services_from(ctx.obj)
    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)
    apply_traceback_preferences(traceback)
    ctx.obj = CLIContext(config=config, services=services, profile=profile, set_overrides=set_overrides)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


__all__ = ["cli"]
