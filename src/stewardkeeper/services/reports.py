"""Report orchestration: compose the aggregation services into one view model.

``build_report`` is a pure function of its arguments. Inputs are converted to
immutable snapshots up front, so callers' lists are never mutated and two
builds over the same inputs produce equal results. ``load_report`` is the thin
storage-facing wrapper that fetches the windows a report needs.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable

from ..domain.periods import DateRange, TimeRange
from ..domain.records import snapshot_donations, snapshot_income, snapshot_recipients
from ..domain.repositories import DonationRepository, IncomeRepository, RecipientRepository
from ..logging_config import get_logger
from .bucketing import bucket_records
from .categories import CategorySlice, aggregate_by_recipient
from .export import donation_rows
from .goals import GoalProgress, goal_for_range, progress
from .obligations import PendingObligation, obligation_for
from .series import Series, to_series
from .settings import ReportSettings

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ReportViewModel:
    range: TimeRange
    period: DateRange
    currency: str
    series: Series
    slices: tuple[CategorySlice, ...]
    period_total: Decimal
    period_goal: GoalProgress
    annual_total: Decimal
    annual_goal: GoalProgress
    pending: PendingObligation
    rows: tuple[dict[str, Any], ...]

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible representation (Decimals as strings, ISO dates)."""

        def goal(g: GoalProgress) -> dict[str, Any]:
            return {
                "actual": str(g.actual),
                "goal": str(g.goal),
                "ratio": g.ratio,
                "percentDisplay": g.percent_display,
            }

        return {
            "range": self.range.kind.value,
            "anchor": self.range.anchor.isoformat(),
            "start": self.period.start.isoformat(),
            "end": self.period.end.isoformat(),
            "currency": self.currency,
            "series": {
                "maxValue": str(self.series.max_value),
                "points": [
                    {
                        "x": p.x,
                        "y": str(p.y),
                        "label": p.formatted_label,
                        "barFraction": p.bar_fraction,
                    }
                    for p in self.series.points
                ],
            },
            "slices": [
                {
                    "name": s.name,
                    "value": str(s.value),
                    "percentage": s.percentage,
                    "colorIndex": s.color_index,
                    "color": s.color,
                }
                for s in self.slices
            ],
            "periodTotal": str(self.period_total),
            "periodGoal": goal(self.period_goal),
            "annualTotal": str(self.annual_total),
            "annualGoal": goal(self.annual_goal),
            "pending": {
                "rate": str(self.pending.rate),
                "baseSum": str(self.pending.base_sum),
                "owed": str(self.pending.owed),
            },
            "rows": [dict(row) for row in self.rows],
        }


def build_report(
    time_range: TimeRange,
    donations: Iterable[Any] | None,
    income: Iterable[Any] | None,
    recipients: Iterable[Any] | None,
    settings: ReportSettings,
) -> ReportViewModel:
    """Assemble the report for ``time_range``.

    ``donations`` should cover at least the year to date so the annual goal
    bar is accurate; donations outside the selected period are ignored for
    the chart, slices, and export rows. ``income`` may contain processed
    entries, which do not count towards the pending obligation.
    """

    period = time_range.period()
    year_to_date = time_range.year_to_date()

    all_donations = snapshot_donations(donations)
    recipient_snapshot = snapshot_recipients(recipients)
    period_donations = tuple(d for d in all_donations if d.occurred_on in period)

    period_total = sum((d.amount for d in period_donations), Decimal("0"))
    annual_total = sum(
        (d.amount for d in all_donations if d.occurred_on in year_to_date), Decimal("0")
    )

    series = to_series(bucket_records(period_donations, time_range), currency=settings.currency)
    slices = aggregate_by_recipient(period_donations, recipient_snapshot, settings.currency)
    newest_first = sorted(period_donations, key=lambda d: d.occurred_on, reverse=True)

    report = ReportViewModel(
        range=time_range,
        period=period,
        currency=settings.currency,
        series=series,
        slices=tuple(slices),
        period_total=period_total,
        period_goal=progress(period_total, goal_for_range(time_range.kind, settings)),
        annual_total=annual_total,
        annual_goal=progress(annual_total, settings.annual_goal),
        pending=obligation_for(snapshot_income(income), settings),
        rows=tuple(donation_rows(newest_first, recipient_snapshot)),
    )
    logger.debug(
        "Report built",
        extra={
            "range": time_range.kind.value,
            "start": period.start,
            "end": period.end,
            "donations": len(period_donations),
            "buckets": len(series),
            "slices": len(slices),
        },
    )
    return report


def load_report(
    time_range: TimeRange,
    *,
    donations_repo: DonationRepository,
    income_repo: IncomeRepository,
    recipients_repo: RecipientRepository,
    settings: ReportSettings,
) -> ReportViewModel:
    """Fetch the year-to-date donations and unprocessed income, then build."""

    window = time_range.year_to_date()
    return build_report(
        time_range,
        donations_repo.filter_by_date_range(window.start, window.end),
        income_repo.list_unprocessed(),
        recipients_repo.list_all(),
        settings,
    )


__all__ = ["ReportViewModel", "build_report", "load_report"]
