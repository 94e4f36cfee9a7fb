"""
Payroll MCP Tools

Pay period resolution and period earnings exposed as MCP tools. This is the
outer edge of the engine: it fills in defaults from configuration and the
current clock, then calls the pure services.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Literal
from zoneinfo import ZoneInfo

from fastmcp import FastMCP

from payroll_engine.config import get_settings
from payroll_engine.schemas.payroll import PayrollSettings, TimeEntry
from payroll_engine.services.calendar_utils import period_bounds, resolve_timezone
from payroll_engine.services.earnings_calculator import summarize_period
from payroll_engine.services.formatting import (
    format_currency,
    format_hours,
    round_hours,
    round_summary,
)
from payroll_engine.services.pay_period_resolver import resolve_period

# Initialize MCP server (will be started from server.py)
mcp = FastMCP("Payroll Earnings Engine")


def _parse_instant(value: str | None, tz: ZoneInfo) -> datetime:
    """Parse an ISO timestamp; naive values are read as local time in ``tz``."""
    if value is None:
        return datetime.now(tz)
    instant = datetime.fromisoformat(value)
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=tz)
    return instant


def _build_settings(
    pay_period_type: str | None,
    pay_day: str | None,
    pay_period_start_date: str | None,
    overtime_enabled: bool = False,
    overtime_type: str | None = None,
    overtime_rate: float | None = None,
    daily_overtime_threshold: float | None = None,
    weekly_overtime_threshold: float | None = None,
) -> PayrollSettings:
    config = get_settings()
    data: dict[str, Any] = {
        "pay_period_type": pay_period_type or config.default_pay_period_type,
        "pay_day": pay_day or config.default_pay_day,
        "pay_period_start_date": pay_period_start_date,
        "overtime_enabled": overtime_enabled,
        "overtime_type": overtime_type or config.default_overtime_type,
        "overtime_rate": (
            Decimal(str(overtime_rate))
            if overtime_rate is not None
            else config.default_overtime_rate
        ),
    }
    if daily_overtime_threshold is not None:
        data["daily_overtime_threshold"] = Decimal(str(daily_overtime_threshold))
    if weekly_overtime_threshold is not None:
        data["weekly_overtime_threshold"] = Decimal(str(weekly_overtime_threshold))
    return PayrollSettings.from_mapping(data)


def resolve_pay_period(
    pay_period_type: Literal["weekly", "biweekly", "semimonthly", "monthly"] | None = None,
    pay_day: str | None = None,
    pay_period_start_date: str | None = None,
    which: Literal["current", "previous"] = "current",
    reference: str | None = None,
    timezone: str | None = None,
) -> dict:
    """
    Resolve the current or previous pay period.

    Used by "Current Period" / "Last Period" quick filters to pre-populate a
    date-range query.

    Args:
        pay_period_type: weekly, biweekly, semimonthly or monthly
        pay_day: Weekday a weekly period ends on (e.g. "friday")
        pay_period_start_date: First day of any biweekly period (YYYY-MM-DD)
        which: "current" or "previous"
        reference: Evaluation instant (ISO 8601); defaults to now
        timezone: IANA timezone; defaults to the configured timezone

    Returns:
        Dictionary with inclusive local dates, a display label and the UTC
        instant window for storage queries

    Example:
        Weekly periods ending Friday, reference Wednesday 2025-01-15:
        - start: 2025-01-11, end: 2025-01-17, label "Jan 11 - Jan 17"
    """
    tz = resolve_timezone(timezone or get_settings().default_timezone)
    settings = _build_settings(pay_period_type, pay_day, pay_period_start_date)

    period = resolve_period(settings, _parse_instant(reference, tz), which, tz)
    start_instant, end_instant = period_bounds(period, tz)

    return {
        "pay_period_type": settings.pay_period_type.value,
        "which": which,
        "start": period.start.isoformat(),
        "end": period.end.isoformat(),
        "label": period.label,
        "days": period.days,
        "start_instant": start_instant.isoformat(),
        "end_instant": end_instant.isoformat(),
        "timezone": tz.key,
    }


def calculate_period_earnings(
    entries: list[dict],
    hourly_rate: float | None = None,
    pay_period_type: Literal["weekly", "biweekly", "semimonthly", "monthly"] | None = None,
    pay_day: str | None = None,
    pay_period_start_date: str | None = None,
    overtime_enabled: bool = False,
    overtime_type: Literal["weekly40", "daily8", "custom"] | None = None,
    overtime_rate: float | None = None,
    daily_overtime_threshold: float | None = None,
    weekly_overtime_threshold: float | None = None,
    which: Literal["current", "previous"] = "current",
    reference: str | None = None,
    timezone: str | None = None,
    paid_through: str | None = None,
) -> dict:
    """
    Calculate one employee's hours and earnings for a pay period.

    Args:
        entries: Time entries with clockIn, clockOut, durationHours,
            breakStart and breakEnd (ISO 8601 instants)
        hourly_rate: Employee hourly rate; omit when no rate is on file
        pay_period_type: weekly, biweekly, semimonthly or monthly
        pay_day: Weekday a weekly period ends on
        pay_period_start_date: First day of any biweekly period (YYYY-MM-DD)
        overtime_enabled: Whether overtime applies
        overtime_type: weekly40, daily8 or custom
        overtime_rate: Overtime multiplier (>= 1.0)
        daily_overtime_threshold: Daily hours before overtime (custom rule)
        weekly_overtime_threshold: Period hours before overtime (custom rule)
        which: "current" or "previous" period
        reference: Evaluation instant (ISO 8601); defaults to now
        timezone: IANA timezone; defaults to the configured timezone
        paid_through: Last payment instant; earlier entries are excluded

    Returns:
        Dictionary with period, per-day hours and rounded earnings.
        ``earnings`` is null when no hourly rate is available.
    """
    tz = resolve_timezone(timezone or get_settings().default_timezone)
    settings = _build_settings(
        pay_period_type,
        pay_day,
        pay_period_start_date,
        overtime_enabled=overtime_enabled,
        overtime_type=overtime_type,
        overtime_rate=overtime_rate,
        daily_overtime_threshold=daily_overtime_threshold,
        weekly_overtime_threshold=weekly_overtime_threshold,
    )
    now = _parse_instant(reference, tz)
    period = resolve_period(settings, now, which, tz)

    result = summarize_period(
        entries=[TimeEntry.model_validate(entry) for entry in entries],
        settings=settings,
        hourly_rate=Decimal(str(hourly_rate)) if hourly_rate is not None else None,
        period=period,
        tz=tz,
        now=now,
        paid_through=_parse_instant(paid_through, tz) if paid_through else None,
    )

    earnings = None
    if result.earnings is not None:
        rounded = round_summary(result.earnings)
        earnings = {
            "regular_hours": float(rounded.regular_hours),
            "overtime_hours": float(rounded.overtime_hours),
            "regular_pay": float(rounded.regular_pay),
            "overtime_pay": float(rounded.overtime_pay),
            "total_pay": float(rounded.total_pay),
            "total_pay_display": format_currency(rounded.total_pay),
        }

    return {
        "start": period.start.isoformat(),
        "end": period.end.isoformat(),
        "label": period.label,
        "total_hours": float(round_hours(result.total_hours)),
        "total_hours_display": format_hours(result.total_hours),
        "entries_count": result.entries_count,
        "open_entries_count": result.open_entries_count,
        "days": [
            {"date": bucket.day.isoformat(), "hours": float(round_hours(bucket.total_hours))}
            for bucket in result.buckets
        ],
        "earnings": earnings,
        "pay_available": result.earnings_available,
    }


# Registered without the decorator so the plain functions stay importable and callable in tests
mcp.tool()(resolve_pay_period)
mcp.tool()(calculate_period_earnings)
