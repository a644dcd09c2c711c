"""Choices a caller makes when rendering numerals: letter case and output shape."""

from __future__ import annotations

from enum import Enum


class Case(str, Enum):
    """Letter case of the rendered numeral.

    Members compare equal to their string values, so ``greek_numerals.case``
    from TOML and Click's choice strings can be passed straight through.

    Example:
        >>> Case("upper") is Case.UPPER
        True
        >>> Case.LOWER == "lower"
        True
    """

    LOWER = "lower"
    UPPER = "upper"


class OutputFormat(str, Enum):
    """How ``convert`` and ``config`` print their results.

    ``HUMAN`` is plain text, ``JSON`` is a single machine-readable document.
    """

    HUMAN = "human"
    JSON = "json"


__all__ = ["Case", "OutputFormat"]
