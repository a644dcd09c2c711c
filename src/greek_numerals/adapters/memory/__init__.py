"""In-memory stand-ins for the configuration and logging adapters.

Used by :func:`greek_numerals.composition.build_testing`.
"""

from __future__ import annotations

from .config import FRESH_INSTALL, display_config_in_memory, get_config_in_memory
from .logging import init_logging_in_memory

__all__ = [
    "FRESH_INSTALL",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
