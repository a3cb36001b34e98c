"""Report orchestration tests."""

from __future__ import annotations

import json
from datetime import date
from decimal import Decimal

import pytest

from stewardkeeper.domain.errors import ReportInputError
from stewardkeeper.domain.periods import RangeKind, TimeRange
from stewardkeeper.services.reports import build_report, load_report
from stewardkeeper.services.settings import ReportSettings

SETTINGS = ReportSettings(
    currency="USD",
    tithe_rate=Decimal("10"),
    monthly_goal=Decimal("500"),
    annual_goal=Decimal("6000"),
)


@pytest.fixture
def sample(records):
    donations = [
        records.donation("200", date(2026, 3, 2), 1, id=1),
        records.donation("100", date(2026, 3, 9), 2, id=2),
        records.donation("300", date(2026, 2, 14), 1, id=3),
        records.donation("50", date(2025, 12, 25), 1, id=4),
    ]
    income = [records.income("3000", date(2026, 3, 1)), records.income("1000", date(2026, 2, 1), processed=True)]
    recipients = [records.recipient(1, "Grace Church"), records.recipient(2, "Food Bank")]
    return donations, income, recipients


def test_month_report(sample):
    donations, income, recipients = sample
    report = build_report(TimeRange(RangeKind.MONTH, date(2026, 3, 10)), donations, income, recipients, SETTINGS)

    assert report.period.start == date(2026, 3, 1)
    assert report.period.end == date(2026, 3, 10)
    assert len(report.series) == 10
    assert report.series.max_value == Decimal("200")
    assert report.period_total == Decimal("300")
    assert report.period_goal.goal == Decimal("500")
    assert report.period_goal.percent_display == 60
    assert report.annual_total == Decimal("600")
    assert report.annual_goal.percent_display == 10
    assert report.pending.owed == Decimal("300")
    assert [s.name for s in report.slices] == ["Grace Church", "Food Bank"]
    assert [row["id"] for row in report.rows] == [2, 1]


def test_quarter_report_uses_three_month_goal(sample):
    donations, income, recipients = sample
    report = build_report(TimeRange(RangeKind.QUARTER, date(2026, 3, 10)), donations, income, recipients, SETTINGS)

    assert report.period.start == date(2026, 1, 1)
    assert report.period_total == Decimal("600")
    assert report.period_goal.goal == Decimal("1500")
    assert report.period_goal.percent_display == 40


def test_build_does_not_mutate_inputs_and_is_deterministic(sample):
    donations, income, recipients = sample
    before = (list(donations), list(income), list(recipients))
    time_range = TimeRange(RangeKind.YEAR, date(2026, 3, 10))

    first = build_report(time_range, donations, income, recipients, SETTINGS)
    second = build_report(time_range, donations, income, recipients, SETTINGS)

    assert (donations, income, recipients) == before
    assert first == second


def test_empty_inputs_produce_zero_report():
    report = build_report(TimeRange(RangeKind.MONTH, date(2026, 3, 10)), [], [], [], SETTINGS)

    assert len(report.series) == 0
    assert report.slices == ()
    assert report.period_goal.ratio == 0
    assert report.pending.owed == 0
    assert report.rows == ()


def test_to_dict_is_json_serializable(sample):
    donations, income, recipients = sample
    report = build_report(TimeRange(RangeKind.YEAR, date(2026, 3, 10)), donations, income, recipients, SETTINGS)

    data = json.loads(json.dumps(report.to_dict()))

    assert data["range"] == "year"
    assert [p["x"] for p in data["series"]["points"]] == ["Jan", "Feb", "Mar"]
    assert data["pending"]["owed"] == "300.00"
    assert data["slices"][0]["color"].startswith("#")


def test_invalid_range_is_rejected():
    with pytest.raises(ReportInputError):
        TimeRange.parse("decade")


def test_load_report_reads_from_store(
    recipient_factory, donation_factory, income_factory, donation_repo, income_repo, recipient_repo
):
    church = recipient_factory("Grace Church")
    donation_factory("120.00", date(2026, 3, 3), church.id)
    donation_factory("80.00", date(2026, 3, 4), None)
    donation_factory("500.00", date(2025, 11, 1), church.id)
    income_factory("2000.00", date(2026, 3, 1))
    income_factory("900.00", date(2026, 2, 1), processed=True)

    report = load_report(
        TimeRange(RangeKind.MONTH, date(2026, 3, 5)),
        donations_repo=donation_repo,
        income_repo=income_repo,
        recipients_repo=recipient_repo,
        settings=SETTINGS,
    )

    assert report.period_total == Decimal("200.00")
    assert report.annual_total == Decimal("200.00")
    assert [(s.name, s.percentage) for s in report.slices] == [("Grace Church", 60), ("Unknown", 40)]
    assert report.pending.owed == Decimal("200")
