"""
Calendar Utilities

Timezone-aware local date normalization and day boundaries. The timezone is
always passed in by the caller; nothing here reads a process-wide default.
"""

from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from payroll_engine.errors import ConfigurationError
from payroll_engine.schemas.payroll import PayPeriod

# Last representable millisecond of a local day
END_OF_DAY = time(23, 59, 59, 999000)

SECONDS_PER_HOUR = Decimal("3600")


def resolve_timezone(name: str) -> ZoneInfo:
    """Look up an IANA timezone, reporting unknown names as ConfigurationError."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigurationError(f"Unknown timezone: {name!r}") from e


def _require_aware(instant: datetime) -> None:
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise ValueError(f"Instant {instant.isoformat()} has no timezone")


def to_local(instant: datetime, tz: ZoneInfo) -> datetime:
    """Convert an aware instant to wall-clock time in ``tz``."""
    _require_aware(instant)
    return instant.astimezone(tz)


def local_date(instant: datetime, tz: ZoneInfo) -> date:
    """Calendar date of ``instant`` as seen in ``tz``."""
    return to_local(instant, tz).date()


def start_of_day(day: date, tz: ZoneInfo) -> datetime:
    return datetime.combine(day, time.min, tzinfo=tz)


def end_of_day(day: date, tz: ZoneInfo) -> datetime:
    return datetime.combine(day, END_OF_DAY, tzinfo=tz)


def period_bounds(period: PayPeriod, tz: ZoneInfo) -> tuple[datetime, datetime]:
    """
    Inclusive instant window for a pay period, in UTC.

    Suitable for pre-populating ``clock_in >= start AND clock_in <= end``
    filters in a storage query.
    """
    return (
        start_of_day(period.start, tz).astimezone(timezone.utc),
        end_of_day(period.end, tz).astimezone(timezone.utc),
    )


def timedelta_hours(delta: timedelta) -> Decimal:
    """Exact length of ``delta`` in hours."""
    seconds = Decimal(delta.days * 86400 + delta.seconds) + Decimal(delta.microseconds) / Decimal(
        1_000_000
    )
    return seconds / SECONDS_PER_HOUR


def hours_between(start: datetime, end: datetime) -> Decimal:
    """
    Elapsed hours from ``start`` to ``end`` (negative if ``end`` is earlier).

    Both instants are normalized to UTC first so that a DST transition between
    them is counted in real elapsed time rather than wall-clock time.
    """
    _require_aware(start)
    _require_aware(end)
    return timedelta_hours(end.astimezone(timezone.utc) - start.astimezone(timezone.utc))
