"""Locale context for thread-safe, formatter-scoped symbol lookup.

Wraps a Babel Locale and exposes exactly the CLDR data the renderer needs:
era, month, weekday and day-period names, time zone display names, and the
week rules (first weekday, minimal days in the first week) that drive week
numbering.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Symbol tables come from babel.dates (thread-safe, CLDR-based)
    - No dependency on Python's locale module (avoids global state)
    - Instances are cached per normalized locale code (bounded LRU)

Python 3.11+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import datetime
from threading import RLock
from typing import TYPE_CHECKING, ClassVar

from extdateformat.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from extdateformat.core.babel_compat import (
    get_babel_dates,
    get_locale_class,
    get_unknown_locale_error,
    require_babel,
)
from extdateformat.enums import NameWidth, ZoneNameWidth
from extdateformat.locale_utils import normalize_locale

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for rendering operations.

    Use LocaleContext.create() to construct instances with validation and
    caching. Direct construction via __init__ bypasses both.

    Cache Management:
        - LocaleContext.clear_cache(): Clear all cached instances
        - LocaleContext.cache_size(): Get current cache size
        - LocaleContext.cache_info(): Get detailed cache statistics

    Examples:
        >>> ctx = LocaleContext.create('en-US')
        >>> ctx.month_name(12, NameWidth.ABBREVIATED)
        'Dec'

        >>> ctx = LocaleContext.create('de-DE')
        >>> ctx.month_name(12, NameWidth.WIDE)
        'Dezember'

        >>> # Invalid locales fall back to en_US with warning logged
        >>> ctx = LocaleContext.create('invalid-locale')
        >>> ctx.locale_code  # Original code preserved
        'invalid-locale'
        >>> ctx.is_fallback
        True

    Thread Safety:
        LocaleContext is immutable and thread-safe. Cache operations are
        protected by RLock.
    """

    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: "Locale"
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache.

        Use this method to free memory or reset state in tests.
        """
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached instances
            - max_size: Maximum cache size
            - locales: Tuple of cached locale codes (LRU order)

        Example:
            >>> LocaleContext.clear_cache()
            >>> _ = LocaleContext.create('en-US')
            >>> LocaleContext.cache_info()
            {'size': 1, 'max_size': 128, 'locales': ('en_US',)}
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for invalid locales.

        For unknown or invalid locales, logs a warning and falls back to
        en_US. Use create_or_raise() when silent fallback is not acceptable.

        Args:
            locale_code: BCP 47 or POSIX locale identifier ('en-US', 'de_DE')

        Returns:
            LocaleContext instance. For unknown/invalid locales, uses en_US
            data while preserving the original locale_code for debugging.

        Raises:
            BabelImportError: If Babel is not installed
        """
        require_babel("LocaleContext.create")
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        locale_class = get_locale_class()
        unknown_locale_error = get_unknown_locale_error()
        used_fallback = False
        try:
            babel_locale = locale_class.parse(cache_key)
        except unknown_locale_error as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
            )
            babel_locale = locale_class.parse(DEFAULT_LOCALE)
            used_fallback = True
        except ValueError as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s",
                locale_code,
                e,
                DEFAULT_LOCALE,
            )
            babel_locale = locale_class.parse(DEFAULT_LOCALE)
            used_fallback = True

        ctx = cls(locale_code=locale_code, _babel_locale=babel_locale, is_fallback=used_fallback)

        # Double-check: another thread may have created the same context
        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]

            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)

            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create_or_raise(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext or raise on validation failure.

        Not cached; use in tests or when fallback is not acceptable.

        Args:
            locale_code: BCP 47 or POSIX locale identifier

        Raises:
            ValueError: If locale code is invalid or unknown
            BabelImportError: If Babel is not installed
        """
        locale_class = get_locale_class()
        unknown_locale_error = get_unknown_locale_error()
        try:
            babel_locale = locale_class.parse(normalize_locale(locale_code))
        except unknown_locale_error as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        except ValueError as e:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None
        return cls(locale_code=locale_code, _babel_locale=babel_locale)

    @classmethod
    def from_babel_locale(cls, babel_locale: "Locale") -> "LocaleContext":
        """Get the cached context for an already-parsed Babel Locale."""
        return cls.create(str(babel_locale))

    @property
    def babel_locale(self) -> "Locale":
        """Pre-validated Babel Locale object for this context."""
        return self._babel_locale

    # ------------------------------------------------------------------
    # Week rules
    # ------------------------------------------------------------------

    @property
    def first_week_day(self) -> int:
        """First day of the week, 0 = Monday (CLDR weekData)."""
        return int(self._babel_locale.first_week_day)

    @property
    def min_week_days(self) -> int:
        """Minimal number of days the first week of a year or month needs."""
        return int(self._babel_locale.min_week_days)

    # ------------------------------------------------------------------
    # Symbol tables
    # ------------------------------------------------------------------

    def era_name(self, era: int) -> str:
        """Abbreviated era name: 0 = BC, 1 = AD."""
        names = get_babel_dates().get_era_names(NameWidth.ABBREVIATED, locale=self._babel_locale)
        return str(names[era])

    def month_name(self, month: int, width: NameWidth) -> str:
        """Month name in format context.

        Args:
            month: 1 (January) through 12
            width: ABBREVIATED or WIDE
        """
        names = get_babel_dates().get_month_names(width, "format", locale=self._babel_locale)
        return str(names[month])

    def weekday_name(self, weekday: int, width: NameWidth) -> str:
        """Weekday name in format context.

        Args:
            weekday: 0 (Monday) through 6 (Sunday), as datetime.weekday()
            width: ABBREVIATED or WIDE
        """
        names = get_babel_dates().get_day_names(width, "format", locale=self._babel_locale)
        return str(names[weekday])

    def period_name(self, is_pm: bool) -> str:
        """AM/PM marker."""
        names = get_babel_dates().get_period_names(
            NameWidth.ABBREVIATED, "format", locale=self._babel_locale
        )
        return str(names["pm" if is_pm else "am"])

    def timezone_name(self, moment: datetime, *, daylight: bool, width: ZoneNameWidth) -> str:
        """Display name of moment's time zone.

        Babel falls back to a localized GMT offset ("GMT+05:30") when CLDR
        has no name for the zone at the requested width.

        Args:
            moment: Aware datetime whose tzinfo names the zone
            daylight: Select the daylight-saving variant of the name
            width: SHORT or LONG
        """
        return str(
            get_babel_dates().get_timezone_name(
                moment,
                width=width,
                locale=self._babel_locale,
                zone_variant="daylight" if daylight else "standard",
            )
        )
