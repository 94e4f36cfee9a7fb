"""
Pay Period Resolver

Resolves the current or previous pay period for a reference date from an
organization's payroll settings.

Supported cadences:
- weekly: 7 days ending on the configured pay day
- biweekly: 14 days ending on the pay day, phase-locked to ``pay_period_start_date``
- semimonthly: the 1st-15th and the 16th-end of month
- monthly: the calendar month
"""

import calendar
import logging
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from payroll_engine.errors import ConfigurationError
from payroll_engine.schemas.payroll import (
    PayPeriod,
    PayPeriodType,
    PayrollSettings,
    PeriodSelector,
)
from payroll_engine.services.calendar_utils import local_date

logger = logging.getLogger(__name__)

BIWEEKLY_DAYS = 14
SEMIMONTHLY_SPLIT_DAY = 15


def _last_day_of_month(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def _weekly_period(settings: PayrollSettings, day: date) -> PayPeriod:
    # The period containing ``day`` ends on the first pay day on or after it
    days_until_pay_day = (settings.pay_day.number - day.weekday()) % 7
    end = day + timedelta(days=days_until_pay_day)
    return PayPeriod(start=end - timedelta(days=6), end=end)


def _biweekly_period(settings: PayrollSettings, day: date) -> PayPeriod:
    anchor = settings.pay_period_start_date
    if anchor is None:
        raise ConfigurationError(
            "Biweekly pay periods require pay_period_start_date as a phase anchor"
        )
    end = _weekly_period(settings, day).end
    # An odd week count from the anchor means the window closes a pay day later.
    # Floor division keeps the parity for dates before the anchor too.
    if ((end - anchor).days // 7) % 2 == 1:
        end += timedelta(days=7)
    return PayPeriod(start=end - timedelta(days=BIWEEKLY_DAYS - 1), end=end)


def _semimonthly_period(day: date) -> PayPeriod:
    if day.day <= SEMIMONTHLY_SPLIT_DAY:
        return PayPeriod(
            start=day.replace(day=1),
            end=day.replace(day=SEMIMONTHLY_SPLIT_DAY),
        )
    return PayPeriod(
        start=day.replace(day=SEMIMONTHLY_SPLIT_DAY + 1),
        end=_last_day_of_month(day.year, day.month),
    )


def _monthly_period(day: date) -> PayPeriod:
    return PayPeriod(
        start=day.replace(day=1),
        end=_last_day_of_month(day.year, day.month),
    )


def _containing_period(settings: PayrollSettings, day: date) -> PayPeriod:
    period_type = settings.pay_period_type

    if period_type == PayPeriodType.WEEKLY:
        return _weekly_period(settings, day)
    elif period_type == PayPeriodType.BIWEEKLY:
        return _biweekly_period(settings, day)
    elif period_type == PayPeriodType.SEMIMONTHLY:
        return _semimonthly_period(day)
    elif period_type == PayPeriodType.MONTHLY:
        return _monthly_period(day)

    raise ConfigurationError(f"Unsupported pay period type: {period_type!r}")


def period_for_date(
    settings: PayrollSettings,
    day: date,
    which: PeriodSelector | str = PeriodSelector.CURRENT,
) -> PayPeriod:
    """
    Resolve the pay period containing a local date, or the one before it.

    Every cadence tiles the calendar without gaps, so the previous period is
    the one containing the day before the current period starts.

    Raises:
        ConfigurationError: unsupported period type or selector, or a
            biweekly schedule without an anchor date
    """
    try:
        selector = PeriodSelector(which)
    except ValueError as e:
        raise ConfigurationError(f"Unsupported period selector: {which!r}") from e

    period = _containing_period(settings, day)
    if selector == PeriodSelector.PREVIOUS:
        period = _containing_period(settings, period.start - timedelta(days=1))

    logger.debug(
        f"Resolved {selector.value} {PayPeriodType(settings.pay_period_type).value} period for {day}: "
        f"{period.start} - {period.end}"
    )
    return period


def resolve_period(
    settings: PayrollSettings,
    reference: datetime,
    which: PeriodSelector | str,
    tz: ZoneInfo,
) -> PayPeriod:
    """
    Resolve the current or previous pay period for a reference instant.

    The instant is converted to a local date in ``tz`` before any calendar
    arithmetic, so a late-evening UTC timestamp lands on the right local day.

    Args:
        settings: Organization payroll settings
        reference: Timezone-aware evaluation instant
        which: ``current`` or ``previous``
        tz: Organization timezone

    Returns:
        PayPeriod with inclusive local start/end dates
    """
    return period_for_date(settings, local_date(reference, tz), which)
