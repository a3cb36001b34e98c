"""Calendar helpers: date parsing, report ranges, and fetch windows."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum

from .errors import ReportInputError


def parse_date(value: date | datetime | str) -> date:
    """Return a ``date`` from a date, datetime, or ISO ``YYYY-MM-DD`` string."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError as exc:
            raise ReportInputError(f"Invalid ISO date: {value!r}") from exc
    raise ReportInputError(f"Unsupported date value: {value!r}")


def week_start(day: date) -> date:
    """Return the Sunday that starts the (US) week containing ``day``."""

    # date.weekday(): Monday=0 .. Sunday=6
    return day - timedelta(days=(day.weekday() + 1) % 7)


def quarter_start(day: date) -> date:
    return date(day.year, ((day.month - 1) // 3) * 3 + 1, 1)


@dataclass(frozen=True, slots=True)
class DateRange:
    """Inclusive ``[start, end]`` window used for store queries."""

    start: date
    end: date

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", parse_date(self.start))
        object.__setattr__(self, "end", parse_date(self.end))
        if self.end < self.start:
            raise ReportInputError(
                f"Date range end {self.end.isoformat()} is before start {self.start.isoformat()}"
            )

    def __contains__(self, day: object) -> bool:
        return isinstance(day, date) and self.start <= day <= self.end

    def as_iso(self) -> tuple[str, str]:
        return self.start.isoformat(), self.end.isoformat()


class RangeKind(str, Enum):
    """Report granularity selected by the user."""

    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"


@dataclass(frozen=True, slots=True)
class TimeRange:
    """A range kind plus the "as of" date the report is computed for."""

    kind: RangeKind
    anchor: date = field(default_factory=date.today)

    def __post_init__(self) -> None:
        if not isinstance(self.kind, RangeKind):
            object.__setattr__(self, "kind", _parse_kind(self.kind))
        object.__setattr__(self, "anchor", parse_date(self.anchor))

    @classmethod
    def parse(cls, kind: str | RangeKind, anchor: date | str | None = None) -> "TimeRange":
        if anchor is None:
            return cls(_parse_kind(kind))
        return cls(_parse_kind(kind), parse_date(anchor))

    def period(self) -> DateRange:
        """Fetch window for the selected range, ending at the anchor."""

        if self.kind is RangeKind.MONTH:
            start = self.anchor.replace(day=1)
        elif self.kind is RangeKind.QUARTER:
            start = quarter_start(self.anchor)
        else:
            start = date(self.anchor.year, 1, 1)
        return DateRange(start, self.anchor)

    def year_to_date(self) -> DateRange:
        return DateRange(date(self.anchor.year, 1, 1), self.anchor)


def _parse_kind(kind: str | RangeKind) -> RangeKind:
    if isinstance(kind, RangeKind):
        return kind
    try:
        return RangeKind(str(kind).strip().lower())
    except ValueError as exc:
        choices = ", ".join(k.value for k in RangeKind)
        raise ReportInputError(f"Unknown range {kind!r}; expected one of: {choices}") from exc


__all__ = [
    "DateRange",
    "RangeKind",
    "TimeRange",
    "parse_date",
    "quarter_start",
    "week_start",
]
