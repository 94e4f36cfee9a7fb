"""
Calendar Utilities Unit Tests

Tests for local date normalization and day boundaries.
"""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from zoneinfo import ZoneInfo

import pytest

from payroll_engine.errors import ConfigurationError
from payroll_engine.schemas.payroll import PayPeriod
from payroll_engine.services.calendar_utils import (
    end_of_day,
    hours_between,
    local_date,
    period_bounds,
    resolve_timezone,
    start_of_day,
    timedelta_hours,
)


class TestTimezoneResolution:
    """Test timezone lookup."""

    def test_known_timezone(self):
        assert resolve_timezone("America/Chicago") == ZoneInfo("America/Chicago")

    def test_unknown_timezone_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            resolve_timezone("Mars/Olympus_Mons")

    def test_empty_timezone_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            resolve_timezone("")


class TestLocalDate:
    """Test conversion of instants to local calendar dates."""

    def test_late_evening_local_is_next_day_utc(self, chicago):
        """21:00 Chicago on Jan 15 is already Jan 16 in UTC."""
        instant = datetime(2025, 1, 16, 3, 0, tzinfo=timezone.utc)

        assert local_date(instant, chicago) == date(2025, 1, 15)
        assert local_date(instant, ZoneInfo("UTC")) == date(2025, 1, 16)

    def test_naive_instant_rejected(self, chicago):
        with pytest.raises(ValueError):
            local_date(datetime(2025, 1, 15, 12, 0), chicago)


class TestDayBoundaries:
    """Test start/end of local day and period bounds."""

    def test_start_and_end_of_day(self, chicago):
        start = start_of_day(date(2025, 1, 15), chicago)
        end = end_of_day(date(2025, 1, 15), chicago)

        assert start == datetime(2025, 1, 15, 6, 0, tzinfo=timezone.utc)
        assert end == datetime(2025, 1, 16, 5, 59, 59, 999000, tzinfo=timezone.utc)

    def test_period_bounds_are_utc_and_inclusive(self, chicago):
        period = PayPeriod(start=date(2025, 1, 11), end=date(2025, 1, 17))

        start, end = period_bounds(period, chicago)

        assert start == datetime(2025, 1, 11, 6, 0, tzinfo=timezone.utc)
        assert end == datetime(2025, 1, 18, 5, 59, 59, 999000, tzinfo=timezone.utc)
        assert start.utcoffset() == timedelta(0)

    def test_period_bounds_follow_dst(self, chicago):
        """Summer days end at 04:59:59.999 UTC (UTC-5)."""
        period = PayPeriod(start=date(2025, 7, 1), end=date(2025, 7, 15))

        _, end = period_bounds(period, chicago)

        assert end == datetime(2025, 7, 16, 4, 59, 59, 999000, tzinfo=timezone.utc)


class TestHoursBetween:
    """Test elapsed hour calculation."""

    def test_simple_shift(self):
        start = datetime(2025, 1, 15, 14, 0, tzinfo=timezone.utc)
        end = datetime(2025, 1, 15, 22, 30, tzinfo=timezone.utc)

        assert hours_between(start, end) == Decimal("8.5")

    def test_spring_forward_counts_real_elapsed_time(self, chicago):
        """Midnight to 06:00 local on the DST start day is only 5 hours."""
        start = datetime(2025, 3, 9, 0, 0, tzinfo=chicago)
        end = datetime(2025, 3, 9, 6, 0, tzinfo=chicago)

        assert hours_between(start, end) == Decimal("5")

    def test_reversed_instants_are_negative(self):
        start = datetime(2025, 1, 15, 14, 0, tzinfo=timezone.utc)

        assert hours_between(start, start - timedelta(hours=2)) == Decimal("-2")

    def test_timedelta_hours_is_exact(self):
        assert timedelta_hours(timedelta(minutes=90)) == Decimal("1.5")
        assert timedelta_hours(timedelta(days=1, seconds=1800)) == Decimal("24.5")
