"""
Presentation Helper Unit Tests
"""

from decimal import Decimal

from payroll_engine.schemas.payroll import EarningsSummary
from payroll_engine.services.formatting import (
    format_currency,
    format_hours,
    round_money,
    round_summary,
)


class TestRounding:
    """Test half-up rounding to cents."""

    def test_round_half_up(self):
        assert round_money(Decimal("2.345")) == Decimal("2.35")
        assert round_money(Decimal("2.344")) == Decimal("2.34")

    def test_round_summary(self):
        summary = EarningsSummary(
            regular_hours=Decimal("13.3333"),
            overtime_hours=Decimal("0.6667"),
            regular_pay=Decimal("199.9995"),
            overtime_pay=Decimal("15.00075"),
            total_pay=Decimal("215.00025"),
        )

        rounded = round_summary(summary)

        assert rounded.regular_hours == Decimal("13.33")
        assert rounded.overtime_hours == Decimal("0.67")
        assert rounded.regular_pay == Decimal("200.00")
        assert rounded.overtime_pay == Decimal("15.00")
        assert rounded.total_pay == Decimal("215.00")


class TestDisplayFormats:
    """Test currency and hour display strings."""

    def test_currency(self):
        assert format_currency(Decimal("1234.5")) == "$1,234.50"
        assert format_currency(Decimal("0")) == "$0.00"
        assert format_currency(Decimal("-12.345")) == "-$12.35"

    def test_hours(self):
        assert format_hours(Decimal("8")) == "8h"
        assert format_hours(Decimal("7.5")) == "7h 30m"
        assert format_hours(Decimal("0.25")) == "0h 15m"
