"""Click context settings shared by the command group and its commands."""

from __future__ import annotations

from typing import Any, Final

#: ``-h`` works everywhere ``--help`` does.
CLICK_CONTEXT_SETTINGS: Final[dict[str, Any]] = {"help_option_names": ["-h", "--help"]}

#: ``convert -5`` must reach the encoder as a number, not fail as an unknown option.
NUMBER_CONTEXT_SETTINGS: Final[dict[str, Any]] = {**CLICK_CONTEXT_SETTINGS, "ignore_unknown_options": True}

__all__ = ["CLICK_CONTEXT_SETTINGS", "NUMBER_CONTEXT_SETTINGS"]
