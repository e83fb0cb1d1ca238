"""Field renderer: token sequence + calendar snapshot -> formatted text.

Each token renders independently:
    SEPARATOR -> content verbatim
    TEXT      -> content without quote delimiters, '' collapsed to '
    FORMATTER -> calendar field selected by the run's letter, shaped by its
                 width (run length)

Width Rules:
    Numeric fields are zero-padded to the run length ("d" -> "5",
    "dd" -> "05"). Exceptions:
    - y/Y of width 2: two-digit year (value mod 100)
    - M below width 3: month number without padding
    - Z: always sign + HHMM regardless of run length

    Name fields select a CLDR width: M (3 abbreviated, 4+ wide),
    E (up to 3 abbreviated, 4+ wide), z (up to 3 short, 4+ long).
    G and a ignore width.

Output is assembled in a list and joined once every token has rendered, so
a failing token never yields a truncated string.

Python 3.11+.
"""

from collections.abc import Iterable

from extdateformat.constants import RFC822_OFFSET_DIGITS
from extdateformat.diagnostics import (
    ErrorTemplate,
    InvalidFormatLetterError,
    InvalidWidthError,
)
from extdateformat.enums import NameWidth, TokenKind, ZoneNameWidth
from extdateformat.syntax import Token

from .calendar_fields import CalendarSnapshot
from .locale_context import LocaleContext

__all__ = [
    "FieldRenderer",
    "format_rfc822_offset",
    "ordinal_suffix",
    "pad_number",
]

_ORDINAL_SUFFIXES: dict[int, str] = {1: "st", 2: "nd", 3: "rd"}


def ordinal_suffix(day: int) -> str:
    """English ordinal suffix for a day number.

    11, 12 and 13 (and 111, 112, ...) take "th"; otherwise the last digit
    decides: 1 -> "st", 2 -> "nd", 3 -> "rd", anything else -> "th".

    Examples:
        >>> ordinal_suffix(1), ordinal_suffix(2), ordinal_suffix(3)
        ('st', 'nd', 'rd')
        >>> ordinal_suffix(11), ordinal_suffix(12), ordinal_suffix(13)
        ('th', 'th', 'th')
        >>> ordinal_suffix(22), ordinal_suffix(101), ordinal_suffix(113)
        ('nd', 'st', 'th')
    """
    if 11 <= day % 100 <= 13:
        return "th"
    return _ORDINAL_SUFFIXES.get(day % 10, "th")


def pad_number(value: int, width: int) -> str:
    """ASCII decimal zero-padded to width; longer values are never truncated.

    Raises:
        InvalidWidthError: If width is below 1
    """
    if width < 1:
        diagnostic = ErrorTemplate.invalid_width(width, "numeric field")
        raise InvalidWidthError(diagnostic, width=width)
    return f"{value:0{width}d}"


def format_rfc822_offset(offset_minutes: int) -> str:
    """RFC 822 zone offset: sign followed by HHMM.

    Examples:
        >>> format_rfc822_offset(0)
        '+0000'
        >>> format_rfc822_offset(-300)
        '-0500'
        >>> format_rfc822_offset(330)
        '+0530'

    Raises:
        InvalidWidthError: If the offset does not fit four digits
    """
    sign = "-" if offset_minutes < 0 else "+"
    hours, minutes = divmod(abs(offset_minutes), 60)
    hhmm = hours * 100 + minutes
    if hhmm >= 10**RFC822_OFFSET_DIGITS:
        diagnostic = ErrorTemplate.offset_out_of_range(offset_minutes, RFC822_OFFSET_DIGITS)
        raise InvalidWidthError(diagnostic, width=RFC822_OFFSET_DIGITS)
    return sign + pad_number(hhmm, RFC822_OFFSET_DIGITS)


def _format_year(year: int, width: int) -> str:
    if width == 2:
        return pad_number(year % 100, 2)
    return pad_number(year, width)


class FieldRenderer:
    """Renders token sequences against a locale.

    One renderer per locale; it holds no per-call state, so it can be shared
    by any number of concurrent format() calls.

    Example:
        >>> from datetime import UTC, datetime
        >>> from extdateformat.syntax import tokenize
        >>> ctx = LocaleContext.create("en_US")
        >>> renderer = FieldRenderer(ctx)
        >>> moment = datetime(2014, 12, 5, tzinfo=UTC)
        >>> snapshot = CalendarSnapshot.capture(moment, ctx.first_week_day, ctx.min_week_days)
        >>> renderer.render(tokenize("MMM do, yyyy"), snapshot)
        'Dec 5th, 2014'
    """

    __slots__ = ("_context",)

    def __init__(self, context: LocaleContext) -> None:
        self._context = context

    @property
    def context(self) -> LocaleContext:
        return self._context

    def render(self, tokens: Iterable[Token], snapshot: CalendarSnapshot) -> str:
        """Render every token and concatenate the results.

        Args:
            tokens: Token sequence from tokenize()
            snapshot: Calendar fields of the instant being formatted

        Returns:
            Formatted text

        Raises:
            InvalidFormatLetterError: If a formatter token's letter is unknown
            InvalidWidthError: If a field cannot be rendered at its width
        """
        token_list = tuple(tokens)
        parts: list[str] = []
        for index, token in enumerate(token_list):
            match token.kind:
                case TokenKind.SEPARATOR:
                    parts.append(token.content)
                case TokenKind.TEXT:
                    parts.append(token.literal)
                case TokenKind.FORMATTER:
                    try:
                        parts.append(self._render_field(token, snapshot))
                    except InvalidFormatLetterError:
                        raise _locate(token_list, index) from None
        return "".join(parts)

    def _render_field(  # noqa: PLR0911, PLR0912 - one branch per format letter
        self,
        token: Token,
        snapshot: CalendarSnapshot,
    ) -> str:
        ctx = self._context
        width = token.width

        match token.letter:
            case "G":
                return ctx.era_name(snapshot.era)
            case "y":
                return _format_year(snapshot.year, width)
            case "Y":
                return _format_year(snapshot.week_year, width)
            case "M":
                if width < 3:
                    return str(snapshot.month)
                name_width = NameWidth.WIDE if width > 3 else NameWidth.ABBREVIATED
                return ctx.month_name(snapshot.month, name_width)
            case "w":
                return pad_number(snapshot.week_of_year, width)
            case "W":
                return pad_number(snapshot.week_of_month, width)
            case "D":
                return pad_number(snapshot.day_of_year, width)
            case "d":
                return pad_number(snapshot.day_of_month, width)
            case "F":
                return pad_number(snapshot.day_of_week_in_month, width)
            case "E":
                name_width = NameWidth.WIDE if width > 3 else NameWidth.ABBREVIATED
                return ctx.weekday_name(snapshot.weekday, name_width)
            case "a":
                return ctx.period_name(snapshot.is_pm)
            case "h":
                return pad_number(snapshot.hour or 12, width)
            case "H":
                return pad_number(snapshot.hour_of_day, width)
            case "k":
                return pad_number(snapshot.hour_of_day or 24, width)
            case "K":
                return pad_number(snapshot.hour, width)
            case "m":
                return pad_number(snapshot.minute, width)
            case "s":
                return pad_number(snapshot.second, width)
            case "S":
                return pad_number(snapshot.millisecond, width)
            case "z":
                zone_width = ZoneNameWidth.SHORT if width < 4 else ZoneNameWidth.LONG
                return ctx.timezone_name(
                    snapshot.moment, daylight=snapshot.in_daylight_time, width=zone_width
                )
            case "Z":
                return format_rfc822_offset(snapshot.offset_minutes)
            case "o":
                return ordinal_suffix(snapshot.day_of_month)
            case "O":
                return ordinal_suffix(snapshot.day_of_year)
            case _:
                diagnostic = ErrorTemplate.invalid_format_letter(token.letter)
                raise InvalidFormatLetterError(diagnostic, letter=token.letter)


def _locate(token_list: tuple[Token, ...], index: int) -> InvalidFormatLetterError:
    """Rebuild an unknown-letter error with the pattern and a caret position."""
    # Token contents concatenate back to the exact source pattern
    pattern = "".join(t.content for t in token_list)
    position = sum(len(t.content) for t in token_list[:index])
    letter = token_list[index].letter
    diagnostic = ErrorTemplate.invalid_format_letter(letter, pattern, position)
    return InvalidFormatLetterError(diagnostic, letter=letter)
