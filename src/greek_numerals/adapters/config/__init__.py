"""Configuration adapter for the numeral CLI.

Contents:
    * :mod:`.loader` - cached layered configuration
    * :mod:`.settings` - typed ``[greek_numerals]`` defaults
    * :mod:`.overrides` - ``--set SECTION.KEY=VALUE`` handling
    * :mod:`.display` - ``config`` command rendering
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config
from .overrides import apply_overrides
from .settings import NumeralSettings, load_numeral_settings

__all__ = [
    "NumeralSettings",
    "apply_overrides",
    "display_config",
    "get_config",
    "load_numeral_settings",
]
