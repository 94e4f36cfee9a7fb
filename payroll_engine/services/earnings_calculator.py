"""
Earnings Calculator

Combines the regular/overtime hours split with an hourly rate and the
overtime multiplier into an earnings summary.
"""

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime
from decimal import Decimal
from zoneinfo import ZoneInfo

from payroll_engine.errors import ConfigurationError
from payroll_engine.schemas.payroll import (
    DayBucket,
    EarningsSummary,
    PayPeriod,
    PayrollSettings,
    PeriodEarnings,
    TimeEntry,
)
from payroll_engine.services.calendar_utils import local_date
from payroll_engine.services.day_grouping import group_by_day
from payroll_engine.services.overtime_splitter import split_overtime, total_bucket_hours

logger = logging.getLogger(__name__)

HOURS_TOLERANCE = Decimal("0.000001")
MINIMUM_OVERTIME_RATE = Decimal("1")


def _as_decimal(value: Decimal | int | float) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def calculate_earnings(
    total_hours: Decimal | int | float,
    hourly_rate: Decimal | int | float | None,
    settings: PayrollSettings,
    buckets: Sequence[DayBucket],
) -> EarningsSummary | None:
    """
    Calculate regular and overtime pay for a set of worked hours.

    Algorithm:
    1. Reject an overtime multiplier below 1.0
    2. Return None when there is no usable hourly rate
    3. Split the day buckets with the configured overtime rule
    4. regular_pay = regular hours x rate
    5. overtime_pay = overtime hours x rate x overtime multiplier

    A None result means pay is not applicable (no rate on file) and must not
    be shown as zero pay.

    Args:
        total_hours: Total worked hours; must match the bucket sum
        hourly_rate: Employee's hourly rate, or None if not set
        settings: Organization payroll settings
        buckets: Per-day worked hours for the same range

    Raises:
        ConfigurationError: invalid overtime configuration
        ValueError: ``total_hours`` does not reconcile with ``buckets``
    """
    if settings.overtime_rate < MINIMUM_OVERTIME_RATE:
        raise ConfigurationError(
            f"Overtime rate must be at least {MINIMUM_OVERTIME_RATE}, got {settings.overtime_rate}"
        )

    if hourly_rate is None:
        return None
    rate = _as_decimal(hourly_rate)
    if rate <= 0:
        return None

    total = _as_decimal(total_hours)
    split = split_overtime(buckets, settings)
    if abs(split.total_hours - total) > HOURS_TOLERANCE:
        logger.warning(
            f"Hours do not reconcile: total {total}h vs {split.total_hours}h across day buckets"
        )
        raise ValueError(
            f"Total hours {total} do not match day bucket hours {split.total_hours}"
        )

    regular_pay = split.regular_hours * rate
    overtime_pay = split.overtime_hours * rate * settings.overtime_rate

    return EarningsSummary(
        regular_hours=split.regular_hours,
        overtime_hours=split.overtime_hours,
        regular_pay=regular_pay,
        overtime_pay=overtime_pay,
        total_pay=regular_pay + overtime_pay,
    )


def summarize_period(
    entries: Iterable[TimeEntry],
    settings: PayrollSettings,
    hourly_rate: Decimal | int | float | None,
    period: PayPeriod,
    tz: ZoneInfo,
    now: datetime,
    paid_through: datetime | None = None,
) -> PeriodEarnings:
    """
    Hours and earnings for one employee over a pay period.

    Entries count toward the period when their local clock-in date falls
    inside it. With ``paid_through`` set, only entries clocked in after that
    instant are counted, giving the amount still owed since the last payment.
    """
    selected = [
        entry
        for entry in entries
        if period.contains(local_date(entry.clock_in, tz))
        and (paid_through is None or entry.clock_in > paid_through)
    ]

    buckets = group_by_day(selected, tz, now)
    total_hours = total_bucket_hours(buckets)

    return PeriodEarnings(
        period=period,
        total_hours=total_hours,
        entries_count=len(selected),
        open_entries_count=sum(1 for entry in selected if entry.is_open),
        buckets=buckets,
        earnings=calculate_earnings(total_hours, hourly_rate, settings, buckets),
    )
