"""State the root command hands to ``convert``, ``info`` and ``config``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from greek_numerals.adapters.config.overrides import apply_overrides

if TYPE_CHECKING:
    from greek_numerals.composition import AppServices


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Configuration and services resolved once by the root command.

    Attributes:
        config: Merged configuration with ``--set`` overrides applied.
        services: Adapters built from the factory passed in Click's ``obj``.
        profile: Root ``--profile``, if any.
        set_overrides: Raw ``--set`` arguments, kept for profile reloads.
    """

    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    def config_for(self, profile: str | None) -> Config:
        """Return the root configuration, or re-read it under ``profile``.

        A re-read configuration gets the same ``--set`` overrides, so they
        win over the profile's files too.
        """
        if not profile:
            return self.config
        return apply_overrides(self.services.get_config(profile=profile), self.set_overrides)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Find the :class:`CLIContext` the root command stored.

    Raises:
        RuntimeError: If a subcommand runs without the root group.
    """
    cli_ctx = ctx.find_object(CLIContext)
    if cli_ctx is None:
        raise RuntimeError("greek-numerals subcommands must run below the root command group")
    return cli_ctx


def apply_traceback_preferences(enabled: bool) -> None:
    """Make ``lib_cli_exit_tools`` print full, coloured tracebacks when ``enabled``."""
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


__all__ = ["CLIContext", "apply_traceback_preferences", "get_cli_context"]
