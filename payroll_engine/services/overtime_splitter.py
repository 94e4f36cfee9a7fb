"""
Overtime Splitter

Splits worked hours into regular and overtime hours under the configured
overtime rule. Every rule keeps ``regular + overtime == total``; no rounding
happens here.
"""

import logging
from collections.abc import Callable, Sequence
from decimal import Decimal

from payroll_engine.errors import ConfigurationError
from payroll_engine.schemas.payroll import (
    DayBucket,
    HoursSplit,
    OvertimeType,
    PayrollSettings,
)

logger = logging.getLogger(__name__)

WEEKLY_OVERTIME_THRESHOLD = Decimal("40")
DAILY_OVERTIME_THRESHOLD = Decimal("8")

ZERO = Decimal("0")


def total_bucket_hours(buckets: Sequence[DayBucket]) -> Decimal:
    return sum((bucket.total_hours for bucket in buckets), ZERO)


def _split_period_threshold(total: Decimal, threshold: Decimal) -> HoursSplit:
    return HoursSplit(
        regular_hours=min(total, threshold),
        overtime_hours=max(total - threshold, ZERO),
    )


def _split_daily_threshold(
    buckets: Sequence[DayBucket], threshold: Decimal
) -> HoursSplit:
    regular = ZERO
    overtime = ZERO
    for bucket in buckets:
        regular += min(bucket.total_hours, threshold)
        overtime += max(bucket.total_hours - threshold, ZERO)
    return HoursSplit(regular_hours=regular, overtime_hours=overtime)


def _split_weekly_40(buckets: Sequence[DayBucket], settings: PayrollSettings) -> HoursSplit:
    # Distribution across days does not matter for a period total threshold
    return _split_period_threshold(total_bucket_hours(buckets), WEEKLY_OVERTIME_THRESHOLD)


def _split_daily_8(buckets: Sequence[DayBucket], settings: PayrollSettings) -> HoursSplit:
    return _split_daily_threshold(buckets, DAILY_OVERTIME_THRESHOLD)


def _split_custom(buckets: Sequence[DayBucket], settings: PayrollSettings) -> HoursSplit:
    """
    Daily threshold first, then a period threshold on the remaining regular hours.

    Hours already counted as daily overtime are not counted again against the
    period threshold.
    """
    daily = settings.daily_overtime_threshold
    weekly = settings.weekly_overtime_threshold
    if daily is None and weekly is None:
        raise ConfigurationError(
            "Custom overtime requires daily_overtime_threshold or weekly_overtime_threshold"
        )

    if daily is not None:
        split = _split_daily_threshold(buckets, daily)
    else:
        split = HoursSplit(regular_hours=total_bucket_hours(buckets))

    if weekly is not None:
        excess = max(split.regular_hours - weekly, ZERO)
        split = HoursSplit(
            regular_hours=split.regular_hours - excess,
            overtime_hours=split.overtime_hours + excess,
        )
    return split


OVERTIME_RULES: dict[OvertimeType, Callable[[Sequence[DayBucket], PayrollSettings], HoursSplit]] = {
    OvertimeType.WEEKLY_40: _split_weekly_40,
    OvertimeType.DAILY_8: _split_daily_8,
    OvertimeType.CUSTOM: _split_custom,
}


def split_overtime(buckets: Sequence[DayBucket], settings: PayrollSettings) -> HoursSplit:
    """
    Split day buckets into regular and overtime hours.

    Rules:
    - overtime disabled: all hours regular
    - weekly40: hours over 40 in the period are overtime
    - daily8: hours over 8 on any one day are overtime
    - custom: configured daily and/or period thresholds

    Raises:
        ConfigurationError: unrecognized overtime rule, or a custom rule
            without thresholds
    """
    if not settings.overtime_enabled:
        return HoursSplit(regular_hours=total_bucket_hours(buckets))

    try:
        overtime_type = OvertimeType(settings.overtime_type)
        rule = OVERTIME_RULES[overtime_type]
    except (ValueError, KeyError) as e:
        raise ConfigurationError(
            f"Unsupported overtime type: {settings.overtime_type!r}"
        ) from e

    split = rule(buckets, settings)
    logger.debug(
        f"Overtime split ({overtime_type.value}): "
        f"{split.regular_hours}h regular + {split.overtime_hours}h overtime"
    )
    return split
