"""extdateformat - pattern-driven date formatting with ordinal suffixes.

Formats dates with SimpleDateFormat-style patterns extended by two fields:
'o' (ordinal suffix of the day of month) and 'O' (ordinal suffix of the day
of year). Locale data (month, weekday, era, AM/PM and time zone names) comes
from Babel's CLDR tables.

    >>> from datetime import date
    >>> from extdateformat import ExtendedDateFormat
    >>> ExtendedDateFormat("'Today is' MMM do, yyyy", "en_US").format(date(2014, 12, 5))
    'Today is Dec 5th, 2014'

Public API:
    ExtendedDateFormat - Formatter bound to one pattern and locale
    format_date - One-off formatting helper
    tokenize - Lex a pattern into Token objects (no Babel needed)
    Token, TokenKind - Pattern token types

Exceptions:
    DateFormatError - Base exception class
    InvalidFormatLetterError - Unknown format letter at render time
    InvalidWidthError - Field width outside supported bounds
    InvalidValueError - Value is not a date/time
    BabelImportError - Rendering attempted without Babel installed

Submodules:
    extdateformat.syntax - Tokens and the pattern lexer
    extdateformat.runtime - Calendar snapshots, locale context, renderer
    extdateformat.diagnostics - Error types and diagnostic codes
"""

from .core import BabelImportError, is_babel_available
from .diagnostics import (
    DateFormatError,
    InvalidFormatLetterError,
    InvalidValueError,
    InvalidWidthError,
)
from .enums import TokenKind
from .runtime import ExtendedDateFormat, format_date
from .syntax import Token, tokenize

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("extdateformat")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelImportError",
    "DateFormatError",
    "ExtendedDateFormat",
    "InvalidFormatLetterError",
    "InvalidValueError",
    "InvalidWidthError",
    "Token",
    "TokenKind",
    "__version__",
    "format_date",
    "is_babel_available",
    "tokenize",
]
