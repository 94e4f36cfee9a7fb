"""Value models for the payroll engine."""

from payroll_engine.schemas.payroll import (
    DayBucket,
    EarningsSummary,
    HoursSplit,
    OvertimeType,
    PayPeriod,
    PayPeriodType,
    PayrollSettings,
    PeriodEarnings,
    PeriodSelector,
    TimeEntry,
    Weekday,
)

__all__ = [
    "DayBucket",
    "EarningsSummary",
    "HoursSplit",
    "OvertimeType",
    "PayPeriod",
    "PayPeriodType",
    "PayrollSettings",
    "PeriodEarnings",
    "PeriodSelector",
    "TimeEntry",
    "Weekday",
]
