"""Locale code utilities.

Normalizes BCP-47 codes to the POSIX form Babel expects and detects the
environment's default locale, which a formatter uses when no locale is given.

Python 3.11+.
"""

from __future__ import annotations

import os

from extdateformat.constants import DEFAULT_LOCALE

__all__ = [
    "get_system_locale",
    "normalize_locale",
]

_PSEUDO_LOCALES: frozenset[str] = frozenset({"C", "POSIX", ""})


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de")
        'de'
    """
    return locale_code.replace("-", "_")


def _strip_encoding(value: str) -> str:
    """Drop ".UTF-8" style encodings and "@euro" style modifiers."""
    return value.split(".")[0].split("@")[0]


def get_system_locale() -> str:
    """Detect the environment's default locale.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL, LC_TIME, LANG environment variables, in that order

    "C" and "POSIX" pseudo-locales are skipped.

    Returns:
        Locale code in POSIX format, or DEFAULT_LOCALE ("en_US") when
        nothing usable is configured.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()  # when the OS locale is unset
        'de_DE'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None

    if system_locale and system_locale not in _PSEUDO_LOCALES:
        return normalize_locale(_strip_encoding(system_locale))

    for var in ("LC_ALL", "LC_TIME", "LANG"):
        value = os.environ.get(var)
        if value and value not in _PSEUDO_LOCALES:
            code = _strip_encoding(value)
            if code and code not in _PSEUDO_LOCALES:
                return normalize_locale(code)

    return DEFAULT_LOCALE
