"""Application-level settings stored in the database."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import ClassVar

from sqlmodel import Field, SQLModel


class AppSetting(SQLModel, table=True):
    """Key-value storage for user preferences (currency, tithe rate, goals)."""

    __tablename__: ClassVar[str] = "app_setting"

    key: str = Field(primary_key=True, max_length=64)
    value: str = Field(nullable=False, max_length=255)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), nullable=False)


# Seeded on first start; existing values are never overwritten.
DEFAULT_SETTINGS: dict[str, str] = {
    "currency": "USD",
    "tithePercentage": "10",
    "monthlyGoal": "500",
    "annualGoal": "6000",
    "incomeTrackingEnabled": "true",
}
