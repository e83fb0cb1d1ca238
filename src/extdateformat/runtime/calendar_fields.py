"""Calendar field extraction for a single instant.

CalendarSnapshot captures every calendar field the renderer reads from one
aware datetime, computed once per format() call. Snapshots are immutable, so
concurrent format() calls never share mutable calendar state.

Week Numbering:
    Week-of-year, week-of-month and week-based year follow the locale's CLDR
    week rules:
    - first_week_day: Day a week starts on (0 = Monday, 6 = Sunday)
    - min_week_days: Days of a new year (or month) the first week must hold

    en_US uses (6, 1): weeks start Sunday, week 1 contains January 1.
    de_DE uses (0, 4): ISO 8601 weeks.

    A late-December day whose week mostly falls in the next year belongs to
    week 1 of that year; an early-January day whose week is too short belongs
    to the last week of the previous year. Week-of-month has no such
    rollover and may be 0.

Python 3.11+. Zero external dependencies.
"""

import calendar
from dataclasses import dataclass
from datetime import datetime, timedelta

__all__ = ["CalendarSnapshot", "week_of_year"]

_DAYS_PER_WEEK = 7


def _days_in_year(year: int) -> int:
    return 366 if calendar.isleap(year) else 365


def _week_number(day_of_period: int, weekday: int, first_week_day: int, min_week_days: int) -> int:
    """Week of a day within a month or year; 0 means the previous period's last week.

    Args:
        day_of_period: 1-based day within the period
        weekday: 0 (Monday) through 6 (Sunday)
        first_week_day: Locale's first day of week, 0 = Monday
        min_week_days: Locale's minimal days in the first week
    """
    # Position of this day, and of day 1, within their weeks
    offset = (weekday - first_week_day) % _DAYS_PER_WEEK
    first_offset = (offset - (day_of_period - 1)) % _DAYS_PER_WEEK
    week = (day_of_period - 1 + first_offset) // _DAYS_PER_WEEK + 1
    if _DAYS_PER_WEEK - first_offset < min_week_days:
        week -= 1
    return week


def week_of_year(
    year: int,
    day_of_year: int,
    weekday: int,
    first_week_day: int,
    min_week_days: int,
) -> tuple[int, int]:
    """Week-based year and week of year for a day.

    Args:
        year: Calendar year
        day_of_year: 1-based day within year
        weekday: 0 (Monday) through 6 (Sunday)
        first_week_day: Locale's first day of week, 0 = Monday
        min_week_days: Locale's minimal days in the first week

    Returns:
        (week_year, week) tuple

    Examples:
        >>> week_of_year(2014, 339, 4, 6, 1)  # 2014-12-05, en_US rules
        (2014, 49)
        >>> week_of_year(2021, 1, 4, 0, 4)  # 2021-01-01, ISO rules
        (2020, 53)
    """
    week = _week_number(day_of_year, weekday, first_week_day, min_week_days)
    if week == 0:
        previous = year - 1
        day_in_previous = day_of_year + _days_in_year(previous)
        return previous, _week_number(day_in_previous, weekday, first_week_day, min_week_days)

    offset = (weekday - first_week_day) % _DAYS_PER_WEEK
    days_left_in_year = _days_in_year(year) - day_of_year
    days_in_next_year = (_DAYS_PER_WEEK - 1 - offset) - days_left_in_year
    if days_in_next_year >= min_week_days:
        return year + 1, 1
    return year, week


@dataclass(frozen=True, slots=True)
class CalendarSnapshot:
    """Calendar fields of one instant, in one time zone, under one locale's week rules.

    Attributes:
        moment: The aware datetime the fields were taken from
        era: 0 = BC, 1 = AD
        year: Calendar year
        week_year: Year the instant's week belongs to
        month: 1 (January) through 12
        week_of_year: Week within week_year
        week_of_month: Week within month (0 before the first full-enough week)
        day_of_year: 1-based
        day_of_month: 1-based
        day_of_week_in_month: 1 for days 1-7, 2 for days 8-14, ...
        weekday: 0 (Monday) through 6 (Sunday)
        hour_of_day: 0-23
        minute: 0-59
        second: 0-59
        millisecond: 0-999
        zone_offset: Standard UTC offset of the zone
        dst_offset: Daylight-saving adjustment in effect
    """

    moment: datetime
    era: int
    year: int
    week_year: int
    month: int
    week_of_year: int
    week_of_month: int
    day_of_year: int
    day_of_month: int
    day_of_week_in_month: int
    weekday: int
    hour_of_day: int
    minute: int
    second: int
    millisecond: int
    zone_offset: timedelta
    dst_offset: timedelta

    @classmethod
    def capture(cls, moment: datetime, first_week_day: int, min_week_days: int) -> "CalendarSnapshot":
        """Extract all fields from an aware datetime.

        Args:
            moment: Aware datetime, already in the zone to render
            first_week_day: Locale's first day of week, 0 = Monday
            min_week_days: Locale's minimal days in the first week

        Raises:
            ValueError: If moment is naive
        """
        utc_offset = moment.utcoffset()
        if utc_offset is None:
            msg = f"CalendarSnapshot requires an aware datetime, got {moment!r}"
            raise ValueError(msg)
        dst_offset = moment.dst() or timedelta(0)

        day_of_year = moment.timetuple().tm_yday
        weekday = moment.weekday()
        week_year, week = week_of_year(
            moment.year, day_of_year, weekday, first_week_day, min_week_days
        )

        return cls(
            moment=moment,
            # datetime covers years 1-9999 only, all AD
            era=1,
            year=moment.year,
            week_year=week_year,
            month=moment.month,
            week_of_year=week,
            week_of_month=_week_number(moment.day, weekday, first_week_day, min_week_days),
            day_of_year=day_of_year,
            day_of_month=moment.day,
            day_of_week_in_month=(moment.day - 1) // _DAYS_PER_WEEK + 1,
            weekday=weekday,
            hour_of_day=moment.hour,
            minute=moment.minute,
            second=moment.second,
            millisecond=moment.microsecond // 1000,
            zone_offset=utc_offset - dst_offset,
            dst_offset=dst_offset,
        )

    @property
    def is_pm(self) -> bool:
        return self.hour_of_day >= 12

    @property
    def hour(self) -> int:
        """Hour within the AM/PM half, 0-11."""
        return self.hour_of_day % 12

    @property
    def in_daylight_time(self) -> bool:
        return self.dst_offset != timedelta(0)

    @property
    def offset_minutes(self) -> int:
        """Total UTC offset (standard + DST) in whole minutes, truncated toward zero."""
        return int((self.zone_offset + self.dst_offset).total_seconds() / 60)
