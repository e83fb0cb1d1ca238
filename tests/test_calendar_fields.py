"""Tests for calendar field extraction and locale week numbering."""

import dataclasses
from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest
from hypothesis import given
from hypothesis import strategies as st

from extdateformat.runtime import CalendarSnapshot
from extdateformat.runtime.calendar_fields import week_of_year

# (first_week_day, min_week_days)
US_RULES = (6, 1)
ISO_RULES = (0, 4)


def _week(day: date, rules: tuple[int, int]) -> tuple[int, int]:
    return week_of_year(day.year, day.timetuple().tm_yday, day.weekday(), *rules)


class TestWeekOfYear:
    """Week-based year and week number under different week rules."""

    @pytest.mark.parametrize(
        ("day", "expected"),
        [
            (date(2014, 12, 5), (2014, 49)),
            (date(2014, 1, 1), (2014, 1)),
            (date(2014, 12, 27), (2014, 52)),
            (date(2014, 12, 28), (2015, 1)),
            (date(2016, 1, 1), (2016, 1)),
            (date(2016, 1, 3), (2016, 2)),
        ],
    )
    def test_us_rules(self, day: date, expected: tuple[int, int]) -> None:
        """Sunday-start weeks where week 1 holds January 1."""
        assert _week(day, US_RULES) == expected

    @pytest.mark.parametrize(
        ("day", "expected"),
        [
            (date(2021, 1, 1), (2020, 53)),
            (date(2021, 1, 4), (2021, 1)),
            (date(2015, 12, 31), (2015, 53)),
            (date(2024, 12, 30), (2025, 1)),
            (date(2014, 12, 5), (2014, 49)),
        ],
    )
    def test_iso_rules(self, day: date, expected: tuple[int, int]) -> None:
        """Monday-start weeks with at least four days in week 1."""
        assert _week(day, ISO_RULES) == expected

    @given(st.dates(min_value=date(1900, 1, 1), max_value=date(2100, 12, 31)))
    def test_iso_rules_match_isocalendar(self, day: date) -> None:
        """ISO rules agree with date.isocalendar()."""
        iso = day.isocalendar()
        assert _week(day, ISO_RULES) == (iso.year, iso.week)

    @given(
        st.dates(min_value=date(1900, 1, 1), max_value=date(2100, 12, 31)),
        st.integers(min_value=0, max_value=6),
        st.integers(min_value=1, max_value=7),
    )
    def test_week_in_range(self, day: date, first_week_day: int, min_week_days: int) -> None:
        """Weeks are 1-53 and the week year is adjacent to the calendar year."""
        week_year, week = _week(day, (first_week_day, min_week_days))
        assert 1 <= week <= 53
        assert abs(week_year - day.year) <= 1


class TestCapture:
    """CalendarSnapshot.capture field extraction."""

    def test_fields(self) -> None:
        """All fields of a reference instant."""
        moment = datetime(2014, 12, 5, 19, 5, 7, 123456, tzinfo=UTC)
        snap = CalendarSnapshot.capture(moment, *US_RULES)

        assert snap.moment is moment
        assert snap.era == 1
        assert (snap.year, snap.week_year, snap.month) == (2014, 2014, 12)
        assert (snap.week_of_year, snap.week_of_month) == (49, 1)
        assert (snap.day_of_year, snap.day_of_month) == (339, 5)
        assert snap.day_of_week_in_month == 1
        assert snap.weekday == 4
        assert (snap.hour_of_day, snap.minute, snap.second) == (19, 5, 7)
        assert snap.millisecond == 123
        assert snap.zone_offset == timedelta(0)
        assert snap.dst_offset == timedelta(0)

    def test_derived_hour_fields(self) -> None:
        """is_pm and the 0-11 hour derive from hour_of_day."""
        snap = CalendarSnapshot.capture(datetime(2014, 12, 5, 12, tzinfo=UTC), *US_RULES)
        assert snap.is_pm
        assert snap.hour == 0

    def test_naive_rejected(self) -> None:
        """Naive datetimes have no offset to capture."""
        with pytest.raises(ValueError, match="aware datetime"):
            CalendarSnapshot.capture(datetime(2014, 12, 5), *US_RULES)

    def test_daylight_offsets(self) -> None:
        """DST splits the UTC offset into zone and daylight parts."""
        moment = datetime(2014, 7, 4, 12, tzinfo=ZoneInfo("America/New_York"))
        snap = CalendarSnapshot.capture(moment, *US_RULES)
        assert snap.zone_offset == timedelta(hours=-5)
        assert snap.dst_offset == timedelta(hours=1)
        assert snap.in_daylight_time
        assert snap.offset_minutes == -240

    def test_standard_time(self) -> None:
        """Outside DST the daylight part is zero."""
        moment = datetime(2014, 12, 5, 12, tzinfo=ZoneInfo("America/New_York"))
        snap = CalendarSnapshot.capture(moment, *US_RULES)
        assert not snap.in_daylight_time
        assert snap.offset_minutes == -300

    def test_week_of_month_can_be_zero(self) -> None:
        """Under ISO rules a short leading week is week 0 of the month."""
        # 2014-11-01 is a Saturday
        snap = CalendarSnapshot.capture(datetime(2014, 11, 1, tzinfo=UTC), *ISO_RULES)
        assert snap.week_of_month == 0

    def test_snapshot_is_frozen(self) -> None:
        """Snapshots cannot be mutated."""
        snap = CalendarSnapshot.capture(datetime(2014, 12, 5, tzinfo=UTC), *US_RULES)
        with pytest.raises(dataclasses.FrozenInstanceError):
            snap.year = 2015  # type: ignore[misc]

    @given(st.datetimes(min_value=datetime(1900, 1, 1), max_value=datetime(2100, 12, 31)))
    def test_day_of_week_in_month(self, moment: datetime) -> None:
        """F is 1 + full weeks elapsed since the first of the month."""
        snap = CalendarSnapshot.capture(moment.replace(tzinfo=UTC), *US_RULES)
        assert snap.day_of_week_in_month == (moment.day - 1) // 7 + 1
        assert 1 <= snap.day_of_week_in_month <= 5
