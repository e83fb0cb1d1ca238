"""Shared constants for extdateformat.

Centralized configuration used by the lexer, the renderer and the locale
layer. Placing constants here avoids circular imports between the syntax and
runtime packages.

Constants are grouped by domain:
- Pattern syntax: recognized format letters and the quote character
- Locale defaults: fallback locale code
- Cache limits: memory bounds for caching subsystems
- Field widths: fixed-width renderings

Python 3.11+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Pattern syntax
    "FORMAT_LETTERS",
    "QUOTE",
    # Locale defaults
    "DEFAULT_LOCALE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "MAX_PATTERN_CACHE_SIZE",
    # Field widths
    "RFC822_OFFSET_DIGITS",
]

# ============================================================================
# PATTERN SYNTAX
# ============================================================================

# Letters that start a formatter run. Everything else outside quotes is a
# separator, including letters not listed here.
#   G era, y year, Y week year, M month, w week of year, W week of month,
#   D day of year, d day of month, F day-of-week-in-month, E weekday,
#   a AM/PM, h hour 1-12, H hour 0-23, k hour 1-24, K hour 0-11,
#   m minute, s second, S millisecond, z zone name, Z RFC 822 offset,
#   o day-of-month ordinal suffix, O day-of-year ordinal suffix
FORMAT_LETTERS: frozenset[str] = frozenset("GyYMwWDdFEahHkKmsSzZoO")

# Delimits literal text. Doubled ('') it stands for a literal apostrophe.
QUOTE: str = "'"

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Used when the environment locale cannot be detected or a locale code is
# unknown to CLDR.
DEFAULT_LOCALE: str = "en_US"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# Maximum memoized token sequences (one entry per distinct pattern string).
MAX_PATTERN_CACHE_SIZE: int = 256

# ============================================================================
# FIELD WIDTHS
# ============================================================================

# RFC 822 offsets are always rendered as HHMM after the sign.
RFC822_OFFSET_DIGITS: int = 4
