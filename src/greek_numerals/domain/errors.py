"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class GreekNumeralError(ValueError):
    """Base class for values the numeral encoder cannot represent.

    Inherits from ValueError so callers that only care about "bad value"
    can keep a single ``except ValueError`` handler.

    Example:
        >>> err = GreekNumeralError("cannot encode")
        >>> isinstance(err, ValueError)
        True
    """


class InvalidInputError(GreekNumeralError):
    """Magnitude is negative.

    Example:
        >>> from greek_numerals.domain.errors import InvalidInputError
        >>> str(InvalidInputError("-5 is negative"))
        '-5 is negative'
    """


class ValueOutOfRangeError(GreekNumeralError):
    """Magnitude exceeds the largest representable numeral.

    The myriad power prefix is a single unit letter, so the highest power
    of 10,000 is 9 and the largest value is ``10**40 - 1``.

    Example:
        >>> from greek_numerals.domain.errors import ValueOutOfRangeError
        >>> isinstance(ValueOutOfRangeError("too large"), GreekNumeralError)
        True
    """


class ConfigurationError(Exception):
    """Missing, invalid, or inconsistent configuration.

    Raised when the ``[greek_numerals]`` section holds values that fail
    validation. Caught at CLI boundaries and reported with EX_CONFIG.

    Example:
        >>> err = ConfigurationError("case must be 'lower' or 'upper'")
        >>> str(err)
        "case must be 'lower' or 'upper'"
    """


__all__ = [
    "ConfigurationError",
    "GreekNumeralError",
    "InvalidInputError",
    "ValueOutOfRangeError",
]
