"""Command-line interface for ``greek-numerals``.

Importing this package attaches the subcommands to :data:`cli`.
"""

from __future__ import annotations

from .commands import cli_config, cli_convert, cli_info
from .context import CLIContext, apply_traceback_preferences, get_cli_context
from .exit_codes import ExitCode
from .main import main
from .root import cli

for _command in (cli_convert, cli_info, cli_config):
    cli.add_command(_command)
del _command

__all__ = [
    "CLIContext",
    "ExitCode",
    "apply_traceback_preferences",
    "cli",
    "cli_config",
    "cli_convert",
    "cli_info",
    "get_cli_context",
    "main",
]
