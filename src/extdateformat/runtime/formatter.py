"""ExtendedDateFormat - main API for pattern-driven date formatting.

Python 3.11+. External dependency: Babel (CLDR locale data).
"""

import logging
from datetime import UTC, date, datetime, time
from datetime import tzinfo as TzInfo
from typing import TYPE_CHECKING

from extdateformat.core.babel_compat import get_locale_class
from extdateformat.diagnostics import ErrorTemplate, InvalidValueError
from extdateformat.locale_utils import get_system_locale
from extdateformat.syntax import Token, tokenize

from .calendar_fields import CalendarSnapshot
from .locale_context import LocaleContext
from .renderer import FieldRenderer

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["DateValue", "ExtendedDateFormat", "format_date"]

logger = logging.getLogger(__name__)

# Values accepted by ExtendedDateFormat.format()
DateValue = datetime | date | str


def _resolve_locale(locale: "str | Locale | LocaleContext | None") -> LocaleContext:
    if locale is None:
        return LocaleContext.create(get_system_locale())
    if isinstance(locale, LocaleContext):
        return locale
    if isinstance(locale, str):
        return LocaleContext.create(locale)
    if isinstance(locale, get_locale_class()):
        return LocaleContext.from_babel_locale(locale)
    msg = f"locale must be a str, babel.Locale or LocaleContext, got {type(locale).__name__}"
    raise TypeError(msg)


class ExtendedDateFormat:
    """Pattern-driven date formatter with ordinal suffix fields.

    Follows the classic SimpleDateFormat letter set (G y Y M w W D d F E a
    h H k K m s S z Z) and adds two fields:
    - o: ordinal suffix of the day of month ("st", "nd", "rd", "th")
    - O: ordinal suffix of the day of year

    Text between single quotes is copied literally; '' is an apostrophe.
    Any other character, including letters outside the set above, is copied
    unchanged.

    The pattern is tokenized once at construction. Each format() call takes
    a fresh calendar snapshot, so one instance can serve concurrent callers
    without locking.

    Time Zones:
        - tzinfo given: aware values are converted into it, naive values are
          assumed to already be in it
        - tzinfo omitted: aware values keep their zone, naive values are UTC

    Examples:
        >>> from datetime import datetime
        >>> fmt = ExtendedDateFormat("'Today is' MMM do, yyyy", "en_US")
        >>> fmt.format(datetime(2014, 12, 5))
        'Today is Dec 5th, 2014'

        >>> ExtendedDateFormat("EEEE d MMMM", "de_DE").format(datetime(2014, 12, 5))
        'Freitag 5 Dezember'

        >>> ExtendedDateFormat("h:mm a, Z", "en_US").format(datetime(2014, 12, 5, 19, 5))
        '7:05 PM, +0000'
    """

    __slots__ = ("_context", "_pattern", "_renderer", "_tokens", "_tzinfo")

    def __init__(
        self,
        pattern: str | None,
        locale: "str | Locale | LocaleContext | None" = None,
        *,
        tzinfo: TzInfo | None = None,
    ) -> None:
        """Initialize formatter for pattern and locale.

        Args:
            pattern: Date-format pattern. None is treated as "" (empty output).
            locale: Locale code (en_US, de-DE), babel.Locale, or LocaleContext.
                None selects the environment's default locale. Unknown codes
                fall back to en_US with a warning logged.
            tzinfo: Zone to render in (see class docstring)

        Raises:
            BabelImportError: If Babel is not installed
            TypeError: If locale has an unsupported type
        """
        self._pattern = "" if pattern is None else pattern
        self._context = _resolve_locale(locale)
        self._tokens = tokenize(self._pattern)
        self._renderer = FieldRenderer(self._context)
        self._tzinfo = tzinfo

        logger.debug(
            "ExtendedDateFormat initialized: pattern=%r locale=%s tokens=%d",
            self._pattern,
            self._context.locale_code,
            len(self._tokens),
        )

    @property
    def pattern(self) -> str:
        """Pattern this formatter renders (read-only)."""
        return self._pattern

    @property
    def locale(self) -> LocaleContext:
        """Locale context supplying names and week rules (read-only)."""
        return self._context

    @property
    def tokens(self) -> tuple[Token, ...]:
        """Cached token sequence (read-only)."""
        return self._tokens

    @property
    def tzinfo(self) -> TzInfo | None:
        """Zone values are rendered in, or None (read-only)."""
        return self._tzinfo

    def __repr__(self) -> str:
        return (
            f"ExtendedDateFormat(pattern={self._pattern!r}, "
            f"locale={self._context.locale_code!r}, tzinfo={self._tzinfo!r})"
        )

    def format(self, value: DateValue) -> str:
        """Render value with this formatter's pattern and locale.

        Args:
            value: datetime, date (rendered at midnight), or ISO 8601 string
                such as "2014-12-05T19:05:00+01:00"

        Returns:
            Formatted text

        Raises:
            InvalidValueError: If value is not a date/time or not ISO 8601
            InvalidFormatLetterError: If a token letter is unknown
            InvalidWidthError: If a field cannot be rendered at its width
        """
        moment = self._to_aware(value)
        snapshot = CalendarSnapshot.capture(
            moment,
            self._context.first_week_day,
            self._context.min_week_days,
        )
        return self._renderer.render(self._tokens, snapshot)

    def _to_aware(self, value: DateValue) -> datetime:
        """Coerce value to an aware datetime in the rendering zone."""
        moment: datetime

        # datetime is a date subclass; check it first
        if isinstance(value, datetime):
            moment = value
        elif isinstance(value, date):
            moment = datetime.combine(value, time())
        elif isinstance(value, str):
            try:
                moment = datetime.fromisoformat(value)
            except ValueError as e:
                diagnostic = ErrorTemplate.invalid_value(value, "not ISO 8601 format")
                raise InvalidValueError(diagnostic, value=value) from e
        else:
            diagnostic = ErrorTemplate.invalid_value(
                value, f"unsupported type {type(value).__name__}"
            )
            raise InvalidValueError(diagnostic, value=value)

        if self._tzinfo is not None:
            if moment.tzinfo is None:
                return moment.replace(tzinfo=self._tzinfo)
            return moment.astimezone(self._tzinfo)
        if moment.tzinfo is None:
            return moment.replace(tzinfo=UTC)
        return moment


def format_date(
    value: DateValue,
    pattern: str | None,
    locale: "str | Locale | LocaleContext | None" = None,
    *,
    tzinfo: TzInfo | None = None,
) -> str:
    """Format value with a one-off formatter.

    Token sequences and locale contexts are cached, so repeated calls with
    the same pattern and locale do not re-lex or re-parse.

    Example:
        >>> from datetime import date
        >>> format_date(date(2014, 12, 5), "'Today is' MMM do, yyyy", "en_US")
        'Today is Dec 5th, 2014'
    """
    return ExtendedDateFormat(pattern, locale, tzinfo=tzinfo).format(value)
