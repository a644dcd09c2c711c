"""Greek alphabetic numeral encoder using single digit myriad-power notation.

Greek numerals write numbers with the letters of the alphabet: nine letters
for the units, nine for the tens and nine for the hundreds, reusing the
archaic stigma (6), koppa (90) and sampi (900). Thousands take the unit
letter behind a lower keraia (``͵``). Larger values are split into myriads
(groups of 10,000); each group above the lowest is introduced by a lowercase
unit letter for its power followed by ``Μ``, following the notation of
russellcottrell.com's Greek Number Converter and the MacTutor article on
Greek numbers.

Contents:
    * :data:`NUMERAL_ALPHABET` - The 27 letter table with both cases.
    * :func:`to_greek` - Encode with an explicit :class:`Case`.
    * :func:`to_greek_lowercase` / :func:`to_greek_uppercase` - Case-bound helpers.

System Role:
    Pure domain logic: no I/O, no logging, no shared mutable state. Safe to
    call from any thread.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Final, SupportsIndex

from .enums import Case
from .errors import InvalidInputError, ValueOutOfRangeError

#: GREEK ZERO SIGN, rendered for a magnitude of zero.
GREEK_ZERO: Final[str] = "\U0001018a"
#: Trailing numeral mark (NFC form of U+0374 GREEK NUMERAL SIGN).
KERAIA: Final[str] = "ʹ"
#: Leading thousands mark, GREEK LOWER NUMERAL SIGN.
LOWER_KERAIA: Final[str] = "͵"
#: Capital Mu introducing a myriad power.
MYRIAD_MARK: Final[str] = "Μ"
#: Separator placed between rendered myriad groups.
GROUP_SEPARATOR: Final[str] = ", "

MYRIAD: Final[int] = 10_000
#: The power prefix is a single unit letter.
MAX_MYRIAD_POWER: Final[int] = 9
#: 9,999,999,999,999,999,999,999,999,999,999,999,999,999
MAX_VALUE: Final[int] = MYRIAD ** (MAX_MYRIAD_POWER + 1) - 1

_UNIT_LETTERS: Final[str] = "αβγδεϛζηθ"
_TEN_LETTERS: Final[str] = "ικλμνξοπϙ"
_HUNDRED_LETTERS: Final[str] = "ρστυφχψωϡ"

#: Capitals that differ from ``str.upper``: koppa takes its numeric form.
_CAPITAL_EXCEPTIONS: Final[dict[str, str]] = {"ϙ": "Ϟ"}


@dataclass(frozen=True, slots=True)
class NumeralSymbol:
    """One letter of the numeral alphabet with its value.

    Attributes:
        value: Numeric value in 1-9, 10-90 or 100-900.
        lower: Lowercase letter.
        upper: Uppercase letter.

    Example:
        >>> NumeralSymbol(6, "ϛ", "Ϛ").render(Case.UPPER)
        'Ϛ'
    """

    value: int
    lower: str
    upper: str

    def render(self, case: Case) -> str:
        return self.upper if case is Case.UPPER else self.lower


def _band(letters: str, scale: int) -> tuple[NumeralSymbol, ...]:
    return tuple(
        NumeralSymbol(digit * scale, letter, _CAPITAL_EXCEPTIONS.get(letter, letter.upper()))
        for digit, letter in enumerate(letters, 1)
    )


NUMERAL_ALPHABET: Final[tuple[NumeralSymbol, ...]] = (
    *_band(_UNIT_LETTERS, 1),
    *_band(_TEN_LETTERS, 10),
    *_band(_HUNDRED_LETTERS, 100),
)

_SYMBOLS: Final[dict[int, NumeralSymbol]] = {symbol.value: symbol for symbol in NUMERAL_ALPHABET}


def _myriad_groups(n: int) -> list[tuple[int, int]]:
    """Split ``n`` into ``(power, value)`` pairs, most significant first.

    Example:
        >>> _myriad_groups(90_000_001)
        [(1, 9000), (0, 1)]
    """
    groups: list[tuple[int, int]] = []
    power = 0
    while n:
        n, value = divmod(n, MYRIAD)
        groups.append((power, value))
        power += 1
    groups.reverse()
    return groups


def _encode_group(value: int, power: int, case: Case) -> str:
    """Render one non-zero myriad group with its power marker.

    A group carrying a thousands digit opens with the lower keraia; every
    other group closes with the keraia.

    Example:
        >>> _encode_group(9, 1, Case.LOWER)
        'αΜθʹ'
        >>> _encode_group(7554, 0, Case.LOWER)
        '͵ζφνδ'
    """
    thousands, rest = divmod(value, 1000)
    hundreds, rest = divmod(rest, 100)
    tens, units = divmod(rest, 10)

    parts: list[str] = []
    if power:
        parts.append(_SYMBOLS[power].lower + MYRIAD_MARK)
    if thousands:
        parts.append(LOWER_KERAIA + _SYMBOLS[thousands].render(case))
    for digit, scale in ((hundreds, 100), (tens, 10), (units, 1)):
        if digit:
            parts.append(_SYMBOLS[digit * scale].render(case))
    if not thousands:
        parts.append(KERAIA)
    return "".join(parts)


def to_greek(n: SupportsIndex, case: Case | str = Case.LOWER) -> str:
    """Encode a non-negative integer as a Greek alphabetic numeral.

    Only single-group numerals (below 10,000) honour ``Case.UPPER``.
    Numerals of two or more myriad groups keep lowercase digit letters
    whatever the requested case, as the published conversion tables render
    them: ``Μ`` is the myriad marker there, and an uppercase forty would be
    the same letter. So ``to_greek_uppercase(97554)`` equals
    ``to_greek_lowercase(97554)``.

    Args:
        n: Magnitude in ``0..MAX_VALUE``. Anything implementing ``__index__``
            is accepted.
        case: :class:`Case` member or its string value.

    Returns:
        The rendered numeral. Zero renders as the Greek Zero Sign.

    Raises:
        InvalidInputError: If ``n`` is negative.
        ValueOutOfRangeError: If ``n`` exceeds :data:`MAX_VALUE`.
        TypeError: If ``n`` is not an integer.
        ValueError: If ``case`` is not a valid :class:`Case` value.

    Example:
        >>> to_greek(241)
        'σμαʹ'
        >>> to_greek(241, Case.UPPER)
        'ΣΜΑʹ'
        >>> to_greek(2_056_839_184)
        'βΜκʹ, αΜ͵εχπγ, ͵θρπδ'
        >>> to_greek(-1)
        Traceback (most recent call last):
        ...
        greek_numerals.domain.errors.InvalidInputError: cannot encode negative value -1
    """
    value = operator.index(n)
    case = Case(case)
    if value < 0:
        raise InvalidInputError(f"cannot encode negative value {value}")
    if value > MAX_VALUE:
        raise ValueOutOfRangeError(f"{value} exceeds the largest encodable value {MAX_VALUE}")
    if value == 0:
        return GREEK_ZERO

    groups = _myriad_groups(value)
    digit_case = case if len(groups) == 1 else Case.LOWER
    return GROUP_SEPARATOR.join(
        _encode_group(group, power, digit_case) for power, group in groups if group
    )


def to_greek_lowercase(n: SupportsIndex) -> str:
    """Stringify a number to a lowercase Greek numeral.

    Example:
        >>> to_greek_lowercase(1)
        'αʹ'
        >>> to_greek_lowercase(241)
        'σμαʹ'
    """
    return to_greek(n, Case.LOWER)


def to_greek_uppercase(n: SupportsIndex) -> str:
    """Stringify a number to an uppercase Greek numeral.

    Example:
        >>> to_greek_uppercase(1)
        'Αʹ'
        >>> to_greek_uppercase(241)
        'ΣΜΑʹ'
    """
    return to_greek(n, Case.UPPER)


__all__ = [
    "GREEK_ZERO",
    "GROUP_SEPARATOR",
    "KERAIA",
    "LOWER_KERAIA",
    "MAX_MYRIAD_POWER",
    "MAX_VALUE",
    "MYRIAD",
    "MYRIAD_MARK",
    "NUMERAL_ALPHABET",
    "NumeralSymbol",
    "to_greek",
    "to_greek_lowercase",
    "to_greek_uppercase",
]
