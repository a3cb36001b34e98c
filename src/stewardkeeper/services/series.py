"""Turn ordered buckets into chart-ready series points."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from .bucketing import Bucket
from .money import format_money

# Fraction of the tallest bar used for zero-valued buckets so they stay visible.
MIN_BAR_FRACTION = 2 / 150


@dataclass(frozen=True, slots=True)
class SeriesPoint:
    x: str
    y: Decimal
    formatted_label: str
    bar_fraction: float


@dataclass(frozen=True, slots=True)
class Series:
    points: tuple[SeriesPoint, ...]
    max_value: Decimal

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)


def to_series(buckets: Iterable[Bucket] | None, *, currency: str = "USD") -> Series:
    """Build a series preserving bucket order.

    ``bar_fraction`` is ``y / max_value``; zero buckets get ``MIN_BAR_FRACTION``
    whenever some other bucket is positive, and everything is 0 when the whole
    series is zero.
    """

    buckets = list(buckets or ())
    max_value = max((b.total for b in buckets), default=Decimal("0"))

    points = []
    for bucket in buckets:
        if max_value > 0:
            fraction = float(bucket.total / max_value) if bucket.total > 0 else MIN_BAR_FRACTION
        else:
            fraction = 0.0
        points.append(
            SeriesPoint(
                x=bucket.label,
                y=bucket.total,
                formatted_label=format_money(bucket.total, currency),
                bar_fraction=fraction,
            )
        )
    return Series(points=tuple(points), max_value=max_value)


__all__ = ["MIN_BAR_FRACTION", "Series", "SeriesPoint", "to_series"]
