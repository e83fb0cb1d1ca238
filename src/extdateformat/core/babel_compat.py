"""Babel compatibility layer for lazy dependency loading.

Provides centralized, lazy import infrastructure for Babel to ensure consistent
error messaging and import behavior across all Babel-dependent modules.

Design Rationale:
    Babel is a declared dependency, but loading it pulls in CLDR data. The
    lexer never needs it, so Babel is imported only when rendering starts.
    An environment without Babel can still tokenize patterns.

    This module ensures that:
    1. Tokenizing patterns never triggers Babel imports
    2. Runtime modules get consistent, helpful error messages when Babel is missing
    3. Babel types are available for TYPE_CHECKING without runtime import

Usage Pattern:
    # At module top-level (for type hints only):
    from typing import TYPE_CHECKING
    if TYPE_CHECKING:
        from babel import Locale

    # At function call site (for runtime use):
    from extdateformat.core.babel_compat import get_babel_dates

    def month_names(locale: Locale) -> dict[int, str]:
        return dict(get_babel_dates().get_month_names("wide", locale=locale))

Python 3.11+.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
class BabelDatesProtocol(Protocol):
    """Protocol for Babel dates module interface.

    Defines the subset of babel.dates API actually used by extdateformat:
    the CLDR symbol tables and time zone display names.
    """

    def get_era_names(
        self,
        width: str = "wide",
        locale: Locale | str | None = None,
    ) -> Mapping[int, str]:
        """Era names keyed 0 (BC) and 1 (AD)."""
        ...

    def get_month_names(
        self,
        width: str = "wide",
        context: str = "format",
        locale: Locale | str | None = None,
    ) -> Mapping[int, str]:
        """Month names keyed 1 (January) through 12."""
        ...

    def get_day_names(
        self,
        width: str = "wide",
        context: str = "format",
        locale: Locale | str | None = None,
    ) -> Mapping[int, str]:
        """Weekday names keyed 0 (Monday) through 6 (Sunday)."""
        ...

    def get_period_names(
        self,
        width: str = "wide",
        context: str = "stand-alone",
        locale: Locale | str | None = None,
    ) -> Mapping[str, str]:
        """Day period names keyed "am" and "pm"."""
        ...

    def get_timezone_name(
        self,
        dt_or_tzinfo: datetime | None = None,
        width: str = "long",
        uncommon: bool = False,
        locale: Locale | str | None = None,
        zone_variant: str | None = None,
        return_zone: bool = False,
    ) -> str:
        """Localized time zone display name."""
        ...
# pylint: enable=unnecessary-ellipsis


__all__ = [
    "BabelDatesProtocol",
    "BabelImportError",
    "get_babel_dates",
    "get_locale_class",
    "get_unknown_locale_error",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Provides a consistent, helpful error message directing users to install
    the Babel dependency.
    """

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install Babel"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Uses cached result to avoid repeated import attempts.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Use at the entry point of functions/methods that require Babel.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """Get the Babel Locale class.

    Use when you need the class itself (for isinstance checks, parsing)
    rather than an instance.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_locale_class")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """Get the Babel UnknownLocaleError exception class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_unknown_locale_error")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError


def get_babel_dates() -> BabelDatesProtocol:
    """Get the Babel dates module.

    Returns:
        The babel.dates module (typed via BabelDatesProtocol)

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_dates")
    from babel import dates  # noqa: PLC0415

    return dates
