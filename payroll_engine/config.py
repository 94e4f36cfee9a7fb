"""
Payroll Engine Configuration

Environment-based settings for the pay period and earnings engine.
"""

from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PAYROLL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Payroll Earnings Engine"
    app_version: str = "0.1.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # Calendar
    default_timezone: str = Field(
        default="America/Chicago",
        description="IANA timezone used when a caller does not pass one",
    )

    # Fallback payroll settings for callers without stored configuration
    default_pay_period_type: str = "weekly"
    default_pay_day: str = "friday"
    default_overtime_type: str = "weekly40"
    default_overtime_rate: Decimal = Decimal("1.5")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
