"""Enumerations for extdateformat type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.11+.
"""

from enum import StrEnum


class TokenKind(StrEnum):
    """Kind of pattern token.

    StrEnum provides automatic string conversion: str(TokenKind.TEXT) == "text"
    """

    TEXT = "text"
    """Quoted literal: 'Today is'"""

    FORMATTER = "formatter"
    """Run of one repeated format letter: yyyy, MMM, d"""

    SEPARATOR = "separator"
    """Run of anything else outside quotes: ", ", " - ", "x" """


class NameWidth(StrEnum):
    """CLDR width used when looking up locale symbol names.

    Values match the width keys Babel accepts in babel.dates.
    """

    ABBREVIATED = "abbreviated"
    """Short form: Dec, Fri, AD"""

    WIDE = "wide"
    """Full form: December, Friday, Anno Domini"""


class ZoneNameWidth(StrEnum):
    """Width of a time zone display name (babel.dates.get_timezone_name)."""

    SHORT = "short"
    """Abbreviation where CLDR has one: EST, CET"""

    LONG = "long"
    """Full name: Eastern Standard Time"""


__all__ = [
    "NameWidth",
    "TokenKind",
    "ZoneNameWidth",
]
