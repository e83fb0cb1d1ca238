"""Runtime: calendar snapshots, locale data and rendering.

Requires Babel.

Python 3.11+.
"""

from .calendar_fields import CalendarSnapshot
from .formatter import DateValue, ExtendedDateFormat, format_date
from .locale_context import LocaleContext
from .renderer import FieldRenderer, format_rfc822_offset, ordinal_suffix, pad_number

__all__ = [
    "CalendarSnapshot",
    "DateValue",
    "ExtendedDateFormat",
    "FieldRenderer",
    "LocaleContext",
    "format_date",
    "format_rfc822_offset",
    "ordinal_suffix",
    "pad_number",
]
