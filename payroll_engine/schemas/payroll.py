"""
Payroll Engine Schemas

Value models for payroll settings, time entries, pay periods and earnings.
"""

from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from payroll_engine.errors import ConfigurationError


class PayPeriodType(str, Enum):
    """Pay period cadences."""

    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    SEMIMONTHLY = "semimonthly"
    MONTHLY = "monthly"


class Weekday(str, Enum):
    """Days of the week a pay period can end on."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def number(self) -> int:
        """Day number as returned by ``date.weekday()`` (Monday is 0)."""
        return list(Weekday).index(self)


class OvertimeType(str, Enum):
    """Overtime rules."""

    WEEKLY_40 = "weekly40"
    DAILY_8 = "daily8"
    CUSTOM = "custom"


class PeriodSelector(str, Enum):
    """Which period to resolve relative to the reference date."""

    CURRENT = "current"
    PREVIOUS = "previous"


class PayrollSettings(BaseModel):
    """
    Organization payroll configuration.

    Keys may be given in snake_case or in the camelCase used by the
    settings store (``payPeriodType``, ``overtimeRate``, ...).
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    pay_period_type: PayPeriodType = Field(
        default=PayPeriodType.WEEKLY,
        description="Pay period cadence",
    )
    pay_day: Weekday = Field(
        default=Weekday.FRIDAY,
        description="Weekday a weekly or biweekly period ends on",
    )
    pay_period_start_date: date | None = Field(
        default=None,
        description="Phase anchor choosing which pay days close biweekly periods",
    )

    # Overtime
    overtime_enabled: bool = False
    overtime_type: OvertimeType = OvertimeType.WEEKLY_40
    overtime_rate: Decimal = Field(
        default=Decimal("1.5"),
        ge=1,
        description="Multiplier applied to the hourly rate for overtime hours",
    )
    daily_overtime_threshold: Decimal | None = Field(
        default=None,
        gt=0,
        description="Hours per day before overtime (custom rule)",
    )
    weekly_overtime_threshold: Decimal | None = Field(
        default=None,
        gt=0,
        description="Hours per period before overtime (custom rule)",
    )

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid payroll settings: {e}") from e

    @field_validator("pay_period_type", "pay_day", "overtime_type", mode="before")
    @classmethod
    def normalize_choice(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PayrollSettings":
        """Build settings from a raw stored mapping, reporting bad values as ConfigurationError."""
        return cls(**dict(data))


class TimeEntry(BaseModel):
    """A single clock-in/clock-out record. ``clock_out`` is None while the shift is open."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    clock_in: AwareDatetime
    clock_out: AwareDatetime | None = None
    duration_hours: Decimal | None = Field(
        default=None,
        ge=0,
        description="Stored net duration; takes precedence over clock times",
    )
    break_start: AwareDatetime | None = None
    break_end: AwareDatetime | None = None

    @property
    def is_open(self) -> bool:
        return self.clock_out is None


class PayPeriod(BaseModel):
    """Inclusive range of local dates covered by one paycheck."""

    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    @model_validator(mode="after")
    def check_order(self) -> "PayPeriod":
        if self.end < self.start:
            raise ValueError(f"Period end {self.end} is before start {self.start}")
        return self

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    @property
    def label(self) -> str:
        """Short display label, e.g. ``Jan 11 - Jan 17``."""
        return (
            f"{self.start.strftime('%b')} {self.start.day} - "
            f"{self.end.strftime('%b')} {self.end.day}"
        )

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


class DayBucket(BaseModel):
    """Hours worked on one local calendar day."""

    model_config = ConfigDict(frozen=True)

    day: date
    total_hours: Decimal


class HoursSplit(BaseModel):
    """Regular/overtime split of worked hours."""

    model_config = ConfigDict(frozen=True)

    regular_hours: Decimal = Decimal("0")
    overtime_hours: Decimal = Decimal("0")

    @property
    def total_hours(self) -> Decimal:
        return self.regular_hours + self.overtime_hours


class EarningsSummary(BaseModel):
    """
    Regular/overtime hours and pay for a date range.

    Values are unrounded; rounding is left to presentation.
    """

    model_config = ConfigDict(frozen=True)

    regular_hours: Decimal = Field(..., description="Hours paid at the base rate")
    overtime_hours: Decimal = Field(..., description="Hours paid at the overtime rate")
    regular_pay: Decimal
    overtime_pay: Decimal
    total_pay: Decimal


class PeriodEarnings(BaseModel):
    """Hours and earnings for one employee over one pay period."""

    model_config = ConfigDict(frozen=True)

    period: PayPeriod
    total_hours: Decimal = Decimal("0")
    entries_count: int = 0
    open_entries_count: int = Field(
        default=0,
        description="Entries still clocked in at evaluation time",
    )
    buckets: list[DayBucket] = Field(default_factory=list)

    # None when the employee has no usable hourly rate
    earnings: EarningsSummary | None = None

    @property
    def earnings_available(self) -> bool:
        return self.earnings is not None
