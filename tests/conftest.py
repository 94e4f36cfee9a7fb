"""
Test Configuration and Fixtures

Provides timezones, a fixed evaluation instant and payroll settings.
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from payroll_engine.schemas.payroll import PayrollSettings
from tests.factories import make_settings


@pytest.fixture
def chicago() -> ZoneInfo:
    """Organization timezone used throughout the tests (UTC-6 in winter)."""
    return ZoneInfo("America/Chicago")


@pytest.fixture
def now() -> datetime:
    """Fixed evaluation instant: Friday 2025-01-17 12:00 Chicago time."""
    return datetime(2025, 1, 17, 18, 0, tzinfo=timezone.utc)


@pytest.fixture
def weekly_settings() -> PayrollSettings:
    """Weekly periods ending Friday, overtime after 40 hours."""
    return make_settings(overtime_enabled=True, overtime_type="weekly40")
