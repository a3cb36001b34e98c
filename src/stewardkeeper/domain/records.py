"""Typed, read-only snapshots of stored records.

The reporting services never touch SQLModel rows directly. Rows fetched from
the store are converted into these frozen dataclasses first, so a report is
always computed over an immutable copy of the data.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Iterable

from .periods import parse_date


class DonationType(str, Enum):
    TITHE = "Tithe"
    OFFERING = "Offering"
    CHARITY = "Charity"
    MISSIONS = "Missions"
    SPECIAL = "Special"
    OTHER = "Other"

    @classmethod
    def coerce(cls, value: Any) -> "DonationType":
        """Match case-insensitively; unrecognised labels become ``OTHER``."""

        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        return cls.OTHER


class RecipientCategory(str, Enum):
    CHURCH = "Church"
    CHARITY = "Charity"
    MISSIONS = "Missions"
    INDIVIDUAL = "Individual"
    ORGANIZATION = "Organization"
    OTHER = "Other"

    @classmethod
    def coerce(cls, value: Any) -> "RecipientCategory":
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        return cls.OTHER


def to_amount(value: Any) -> Decimal:
    """Convert a stored amount into a non-negative ``Decimal``."""

    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            # str() first so floats keep their printed value (0.1 -> Decimal("0.1"))
            amount = Decimal(str(value if value is not None else 0))
        except InvalidOperation as exc:
            raise ValueError(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    if amount < 0:
        raise ValueError(f"Amount must be non-negative, got {amount}")
    return amount


@dataclass(frozen=True, slots=True)
class DonationRecord:
    id: int | None
    amount: Decimal
    occurred_on: date
    recipient_id: int | None = None
    donation_type: DonationType = DonationType.TITHE
    notes: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_amount(self.amount))
        object.__setattr__(self, "occurred_on", parse_date(self.occurred_on))
        object.__setattr__(self, "donation_type", DonationType.coerce(self.donation_type))
        object.__setattr__(self, "notes", self.notes or "")

    @classmethod
    def from_model(cls, row: Any) -> "DonationRecord":
        return cls(
            id=row.id,
            amount=row.amount,
            occurred_on=row.occurred_on,
            recipient_id=row.recipient_id,
            donation_type=row.donation_type,
            notes=row.notes,
        )


@dataclass(frozen=True, slots=True)
class IncomeRecord:
    id: int | None
    amount: Decimal
    occurred_on: date
    source: str = ""
    notes: str = ""
    processed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_amount(self.amount))
        object.__setattr__(self, "occurred_on", parse_date(self.occurred_on))
        object.__setattr__(self, "notes", self.notes or "")
        object.__setattr__(self, "processed", bool(self.processed))

    @classmethod
    def from_model(cls, row: Any) -> "IncomeRecord":
        return cls(
            id=row.id,
            amount=row.amount,
            occurred_on=row.occurred_on,
            source=row.source,
            notes=row.notes,
            processed=row.processed,
        )


@dataclass(frozen=True, slots=True)
class RecipientRecord:
    id: int | None
    name: str
    category: RecipientCategory = RecipientCategory.CHURCH
    notes: str = ""
    is_default: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", RecipientCategory.coerce(self.category))
        object.__setattr__(self, "notes", self.notes or "")

    @classmethod
    def from_model(cls, row: Any) -> "RecipientRecord":
        return cls(
            id=row.id,
            name=row.name,
            category=row.category,
            notes=row.notes,
            is_default=row.is_default,
        )


def snapshot_donations(rows: Iterable[Any] | None) -> tuple[DonationRecord, ...]:
    return tuple(
        row if isinstance(row, DonationRecord) else DonationRecord.from_model(row)
        for row in rows or ()
    )


def snapshot_income(rows: Iterable[Any] | None) -> tuple[IncomeRecord, ...]:
    return tuple(
        row if isinstance(row, IncomeRecord) else IncomeRecord.from_model(row)
        for row in rows or ()
    )


def snapshot_recipients(rows: Iterable[Any] | None) -> tuple[RecipientRecord, ...]:
    return tuple(
        row if isinstance(row, RecipientRecord) else RecipientRecord.from_model(row)
        for row in rows or ()
    )


__all__ = [
    "DonationRecord",
    "DonationType",
    "IncomeRecord",
    "RecipientCategory",
    "RecipientRecord",
    "snapshot_donations",
    "snapshot_income",
    "snapshot_recipients",
    "to_amount",
]
