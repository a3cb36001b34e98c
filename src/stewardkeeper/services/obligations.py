"""Pending tithe owed on income that has not been processed yet."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Protocol

from .money import quantize_money
from .settings import ReportSettings


class IncomeLike(Protocol):
    amount: Decimal
    processed: bool


class UnprocessedIncomeSource(Protocol):
    def unprocessed_total(self) -> Decimal:  # pragma: no cover - interface
        ...


@dataclass(frozen=True, slots=True)
class PendingObligation:
    rate: Decimal
    base_sum: Decimal
    owed: Decimal  # rounded to cents


def pending_obligation(unprocessed_income_sum: Decimal, rate_percent: Decimal) -> Decimal:
    """``owed = sum * rate / 100``; the rate is validated upstream."""

    return Decimal(unprocessed_income_sum) * (Decimal(rate_percent) / Decimal(100))


def unprocessed_income_sum(income: Iterable[IncomeLike] | None) -> Decimal:
    return sum((record.amount for record in income or () if not record.processed), Decimal("0"))


def obligation_for(income: Iterable[IncomeLike] | None, settings: ReportSettings) -> PendingObligation:
    base = unprocessed_income_sum(income)
    return PendingObligation(
        rate=settings.tithe_rate,
        base_sum=base,
        owed=quantize_money(pending_obligation(base, settings.tithe_rate)),
    )


def pending_tithe_total(source: UnprocessedIncomeSource, settings: ReportSettings) -> Decimal:
    """Owed tithe, rounded to cents, from the store's unprocessed-income total."""

    return quantize_money(pending_obligation(source.unprocessed_total(), settings.tithe_rate))


__all__ = [
    "PendingObligation",
    "obligation_for",
    "pending_obligation",
    "pending_tithe_total",
    "unprocessed_income_sum",
]
