"""Subcommands of ``greek-numerals``: ``convert``, ``info`` and ``config``."""

from __future__ import annotations

from .config import cli_config
from .convert import cli_convert
from .info import cli_info

__all__ = ["cli_config", "cli_convert", "cli_info"]
