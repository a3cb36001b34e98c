"""SQLModel definition for income entries."""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class Income(SQLModel, table=True):
    """Income received; ``processed`` marks it as already tithed against."""

    __tablename__: ClassVar[str] = "income"

    id: Optional[int] = Field(default=None, primary_key=True)
    amount: Decimal = Field(
        default=Decimal("0"), max_digits=12, decimal_places=2, nullable=False
    )
    occurred_on: date = Field(nullable=False, index=True)
    source: str = Field(nullable=False, max_length=128)
    notes: str = Field(default="", max_length=255)
    processed: bool = Field(default=False, nullable=False, index=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), nullable=False)
