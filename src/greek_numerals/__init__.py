"""Public package surface exposing the numeral encoder, metadata, and configuration.

Routes imports through the architectural layers:
- Domain exports: the encoder, its case selector, and error types
- Composition exports: wired configuration loader
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.enums import Case
from .domain.errors import GreekNumeralError, InvalidInputError, ValueOutOfRangeError
from .domain.numerals import (
    GREEK_ZERO,
    MAX_VALUE,
    to_greek,
    to_greek_lowercase,
    to_greek_uppercase,
)

__all__ = [
    "GREEK_ZERO",
    "MAX_VALUE",
    "Case",
    "GreekNumeralError",
    "InvalidInputError",
    "ValueOutOfRangeError",
    "get_config",
    "print_info",
    "to_greek",
    "to_greek_lowercase",
    "to_greek_uppercase",
]
