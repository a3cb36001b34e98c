"""SQLModel definition for donations."""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class Donation(SQLModel, table=True):
    """A single gift recorded against a recipient."""

    __tablename__: ClassVar[str] = "donation"

    id: Optional[int] = Field(default=None, primary_key=True)
    # Deleting a recipient leaves this id dangling; reports label it "Unknown".
    recipient_id: Optional[int] = Field(default=None, index=True)
    amount: Decimal = Field(
        default=Decimal("0"), max_digits=12, decimal_places=2, nullable=False
    )
    occurred_on: date = Field(nullable=False, index=True)
    donation_type: str = Field(default="Tithe", nullable=False, max_length=32)
    notes: str = Field(default="", max_length=255)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), nullable=False)
