"""Giving-by-recipient aggregation tests."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from stewardkeeper.services.categories import SLICE_PALETTE, aggregate_by_recipient

DAY = date(2026, 3, 1)


def test_two_recipients_sorted_with_percentages(records):
    donations = [records.donation(100, DAY, 1), records.donation(300, DAY, 2)]
    recipients = [records.recipient(1, "A"), records.recipient(2, "B")]

    slices = aggregate_by_recipient(donations, recipients, "USD")

    assert [(s.name, s.value, s.percentage) for s in slices] == [
        ("B", Decimal("300"), 75),
        ("A", Decimal("100"), 25),
    ]
    assert [s.color_index for s in slices] == [0, 1]
    assert slices[0].label == "B: USD 300.00"


def test_missing_recipient_is_grouped_as_unknown(records):
    donations = [
        records.donation(10, DAY, 99),
        records.donation(5, DAY, None),
        records.donation(20, DAY, 1),
    ]

    slices = aggregate_by_recipient(donations, [records.recipient(1, "Grace")])

    assert [(s.name, s.value) for s in slices] == [("Grace", Decimal("20")), ("Unknown", Decimal("15"))]
    assert slices[1].recipient_id is None


def test_same_name_recipients_stay_separate_unless_merged(records):
    donations = [records.donation(10, DAY, 1), records.donation(30, DAY, 2)]
    recipients = [records.recipient(1, "Hope"), records.recipient(2, "Hope")]

    separate = aggregate_by_recipient(donations, recipients)
    merged = aggregate_by_recipient(donations, recipients, merge_same_names=True)

    assert [(s.recipient_id, s.value) for s in separate] == [(2, Decimal("30")), (1, Decimal("10"))]
    assert [(s.name, s.value, s.percentage) for s in merged] == [("Hope", Decimal("40"), 100)]


def test_ties_keep_encounter_order(records):
    donations = [
        records.donation(50, DAY, 3),
        records.donation(50, DAY, 1),
        records.donation(80, DAY, 2),
    ]
    recipients = [records.recipient(i, f"R{i}") for i in (1, 2, 3)]

    slices = aggregate_by_recipient(donations, recipients)

    assert [s.name for s in slices] == ["R2", "R3", "R1"]


def test_percentages_sum_to_100_and_values_non_increasing(records):
    amounts = ["33.33", "12.10", "7", "0.01", "19.99", "101", "3.50", "3.50", "44", "1", "2", "5"]
    donations = [records.donation(a, DAY, i) for i, a in enumerate(amounts)]
    recipients = [records.recipient(i, f"R{i}") for i in range(len(amounts))]

    slices = aggregate_by_recipient(donations, recipients)

    assert sum(s.percentage for s in slices) == pytest.approx(100, abs=1e-6)
    values = [s.value for s in slices]
    assert values == sorted(values, reverse=True)
    # Palette wraps after ten entries
    assert slices[10].color_index == 0
    assert slices[10].color == SLICE_PALETTE[0]


def test_empty_and_zero_total_give_no_slices(records):
    assert aggregate_by_recipient([], [records.recipient(1, "A")]) == []
    assert aggregate_by_recipient(None, None) == []
    assert aggregate_by_recipient([records.donation(0, DAY, 1)], [records.recipient(1, "A")]) == []
