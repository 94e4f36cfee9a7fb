"""
Presentation helpers

Rounding and display formatting for hours and money. The engine itself
never rounds; callers apply these when showing results.
"""

from decimal import ROUND_HALF_UP, Decimal

from payroll_engine.schemas.payroll import EarningsSummary

CENTS = Decimal("0.01")


def round_money(amount: Decimal) -> Decimal:
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def round_hours(hours: Decimal) -> Decimal:
    return hours.quantize(CENTS, rounding=ROUND_HALF_UP)


def round_summary(summary: EarningsSummary) -> EarningsSummary:
    """Copy of ``summary`` with hours and pay rounded to two decimal places."""
    return EarningsSummary(
        regular_hours=round_hours(summary.regular_hours),
        overtime_hours=round_hours(summary.overtime_hours),
        regular_pay=round_money(summary.regular_pay),
        overtime_pay=round_money(summary.overtime_pay),
        total_pay=round_money(summary.total_pay),
    )


def format_currency(amount: Decimal) -> str:
    """Format as US dollars, e.g. ``$1,234.50``."""
    rounded = round_money(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.2f}"


def format_hours(hours: Decimal) -> str:
    """Format as whole hours and minutes, e.g. ``7h 30m`` or ``8h``."""
    total_minutes = int((hours * 60).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    h, m = divmod(total_minutes, 60)
    if m == 0:
        return f"{h}h"
    return f"{h}h {m}m"
