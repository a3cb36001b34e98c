"""Goal progress: actual vs. goal for a reporting period."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from ..domain.periods import RangeKind
from .settings import ReportSettings


@dataclass(frozen=True, slots=True)
class GoalProgress:
    actual: Decimal
    goal: Decimal
    ratio: float
    percent_display: int


def progress(actual: Decimal, goal: Decimal) -> GoalProgress:
    """Return the bar ratio (clamped to ``[0, 1]``) and the unclamped percent text.

    A goal of zero or less yields ratio 0 and 0%, never a division error.
    """

    actual = Decimal(actual)
    goal = Decimal(goal)
    if goal <= 0:
        return GoalProgress(actual=actual, goal=goal, ratio=0.0, percent_display=0)

    raw = actual / goal
    ratio = min(max(float(raw), 0.0), 1.0)
    percent = int((raw * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return GoalProgress(actual=actual, goal=goal, ratio=ratio, percent_display=percent)


def goal_for_range(kind: RangeKind, settings: ReportSettings) -> Decimal:
    """Month uses the monthly goal, quarter three months of it, year the annual goal."""

    if kind is RangeKind.MONTH:
        return settings.monthly_goal
    if kind is RangeKind.QUARTER:
        return settings.monthly_goal * 3
    return settings.annual_goal


__all__ = ["GoalProgress", "goal_for_range", "progress"]
