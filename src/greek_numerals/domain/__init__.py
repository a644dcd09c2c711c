"""Domain layer - pure numeral encoding with no I/O or framework dependencies.

Contents:
    * :mod:`.numerals` - Greek alphabetic numeral encoder
    * :mod:`.enums` - Case and OutputFormat
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import Case, OutputFormat
from .errors import ConfigurationError, GreekNumeralError, InvalidInputError, ValueOutOfRangeError
from .numerals import (
    GREEK_ZERO,
    MAX_VALUE,
    NUMERAL_ALPHABET,
    to_greek,
    to_greek_lowercase,
    to_greek_uppercase,
)

__all__ = [
    # Numerals
    "GREEK_ZERO",
    "MAX_VALUE",
    "NUMERAL_ALPHABET",
    "to_greek",
    "to_greek_lowercase",
    "to_greek_uppercase",
    # Enums
    "Case",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "GreekNumeralError",
    "InvalidInputError",
    "ValueOutOfRangeError",
]
