"""Exit codes raised as ``SystemExit`` by ``greek-numerals`` commands.

Values follow errno and sysexits.h so a calling script can tell a negative
number from one that is too large without parsing stderr. Usage errors keep
Click's own code 2.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes.

    Example:
        >>> int(ExitCode.VALUE_OUT_OF_RANGE)
        34
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    #: EINVAL: negative number, unknown ``config --section``.
    INVALID_ARGUMENT = 22
    #: ERANGE: number above the largest numeral.
    VALUE_OUT_OF_RANGE = 34
    #: EX_CONFIG: invalid ``[greek_numerals]`` section.
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
