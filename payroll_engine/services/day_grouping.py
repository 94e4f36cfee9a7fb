"""
Day Grouping

Reduces a flat list of time entries into per-day hour totals, the unit of
analysis for daily overtime rules.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal
from zoneinfo import ZoneInfo

from payroll_engine.schemas.payroll import DayBucket, TimeEntry
from payroll_engine.services.calendar_utils import hours_between, local_date

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def entry_break_hours(entry: TimeEntry, now: datetime) -> Decimal:
    """
    Length of the entry's break in hours.

    An unfinished break runs until clock-out, or until ``now`` while the
    shift is still open.
    """
    if entry.break_start is None:
        return ZERO

    break_end = entry.break_end or entry.clock_out or now
    return max(hours_between(entry.break_start, break_end), ZERO)


def entry_worked_hours(entry: TimeEntry, now: datetime) -> Decimal:
    """
    Net worked hours for a single entry.

    A stored ``duration_hours`` is already net of breaks and wins over the
    clock times. Otherwise elapsed time runs from clock-in to clock-out (or
    ``now`` for an open shift) minus the break, never going below zero.
    """
    if entry.duration_hours is not None:
        return entry.duration_hours

    elapsed = hours_between(entry.clock_in, entry.clock_out or now)
    worked = elapsed - entry_break_hours(entry, now)
    if worked < ZERO:
        logger.warning(
            f"Entry clocked in at {entry.clock_in.isoformat()} has negative worked time "
            f"({worked}h); counting as zero"
        )
        return ZERO
    return worked


def group_by_day(
    entries: Iterable[TimeEntry],
    tz: ZoneInfo,
    now: datetime,
) -> list[DayBucket]:
    """
    Sum worked hours per local calendar day.

    Each entry's full duration is attributed to the local date of its
    clock-in; overnight shifts are not split at midnight. Days with no
    hours are omitted and buckets are returned in date order.

    Args:
        entries: Time entries for one employee
        tz: Organization timezone used to find each entry's local date
        now: Evaluation instant for still-open shifts and breaks
    """
    totals: dict[date, Decimal] = defaultdict(lambda: ZERO)
    for entry in entries:
        totals[local_date(entry.clock_in, tz)] += entry_worked_hours(entry, now)

    return [
        DayBucket(day=day, total_hours=hours)
        for day, hours in sorted(totals.items())
        if hours > ZERO
    ]
