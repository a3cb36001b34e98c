"""Group dated records into calendar buckets for the giving-over-time chart.

Each range kind has its own granularity:

* ``month``   -- one bucket per day of the anchor's month, keyed by day number.
  Days ``1..anchor.day`` are always present (zero when nothing was given).
* ``quarter`` -- one bucket per week (weeks start on Sunday), keyed
  ``"{month}/{day}"`` of the week start. Only weeks with records appear.
* ``year``    -- one bucket per month, keyed by zero-based month index and
  labelled ``Jan``..``Dec``. Months ``0..anchor.month - 1`` are always present.

Records outside the calendar month/quarter/year containing the anchor are
ignored. Totals are exact ``Decimal`` sums.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Protocol

from ..domain.periods import RangeKind, TimeRange, quarter_start, week_start

MONTH_ABBREVIATIONS = tuple(calendar.month_abbr[1:])
ZERO = Decimal("0")


class Dated(Protocol):
    amount: Decimal
    occurred_on: date


@dataclass(frozen=True, slots=True)
class Bucket:
    key: int | str
    label: str
    total: Decimal
    start: date


def _in_period(day: date, time_range: TimeRange) -> bool:
    anchor = time_range.anchor
    if time_range.kind is RangeKind.MONTH:
        return (day.year, day.month) == (anchor.year, anchor.month)
    if time_range.kind is RangeKind.QUARTER:
        return quarter_start(day) == quarter_start(anchor)
    return day.year == anchor.year


def bucket_records(records: Iterable[Dated] | None, time_range: TimeRange) -> list[Bucket]:
    """Sum record amounts into ordered buckets for ``time_range``.

    An empty or ``None`` record collection yields an empty list. Otherwise the
    month and year ranges are zero-filled through the anchor, even when none of
    the records fall inside the period.
    """

    records = list(records or ())
    if not records:
        return []

    totals: dict[date, Decimal] = {}
    for record in records:
        day = record.occurred_on
        if not _in_period(day, time_range):
            continue
        if time_range.kind is RangeKind.MONTH:
            start = day
        elif time_range.kind is RangeKind.QUARTER:
            start = week_start(day)
        else:
            start = day.replace(day=1)
        totals[start] = totals.get(start, ZERO) + record.amount

    anchor = time_range.anchor
    if time_range.kind is RangeKind.MONTH:
        for day_number in range(1, anchor.day + 1):
            totals.setdefault(anchor.replace(day=day_number), ZERO)
    elif time_range.kind is RangeKind.YEAR:
        for month in range(1, anchor.month + 1):
            totals.setdefault(date(anchor.year, month, 1), ZERO)

    return [_make_bucket(start, total, time_range.kind) for start, total in sorted(totals.items())]


def _make_bucket(start: date, total: Decimal, kind: RangeKind) -> Bucket:
    if kind is RangeKind.MONTH:
        return Bucket(key=start.day, label=str(start.day), total=total, start=start)
    if kind is RangeKind.QUARTER:
        key = f"{start.month}/{start.day}"
        return Bucket(key=key, label=key, total=total, start=start)
    index = start.month - 1
    return Bucket(key=index, label=MONTH_ABBREVIATIONS[index], total=total, start=start)


__all__ = ["Bucket", "MONTH_ABBREVIATIONS", "bucket_records"]
