"""Giving-by-recipient aggregation with percentage shares."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Hashable, Iterable, Protocol

from .money import format_money

UNKNOWN_RECIPIENT = "Unknown"

SLICE_PALETTE: tuple[str, ...] = (
    "#3F51B5",  # indigo
    "#009688",  # teal
    "#4CAF50",  # green
    "#FF9800",  # orange
    "#9C27B0",  # purple
    "#03A9F4",  # light blue
    "#F44336",  # red
    "#FFEB3B",  # yellow
    "#607D8B",  # blue grey
    "#795548",  # brown
)


class RecipientLike(Protocol):
    id: int | None
    name: str


class DonationLike(Protocol):
    amount: Decimal
    recipient_id: int | None


@dataclass(frozen=True, slots=True)
class CategorySlice:
    name: str
    value: Decimal
    percentage: float
    color_index: int
    recipient_id: int | None = None
    label: str = ""

    @property
    def color(self) -> str:
        return SLICE_PALETTE[self.color_index % len(SLICE_PALETTE)]


def aggregate_by_recipient(
    donations: Iterable[DonationLike] | None,
    recipients: Iterable[RecipientLike] | None,
    currency: str = "USD",
    *,
    merge_same_names: bool = False,
) -> list[CategorySlice]:
    """Total donations per recipient, largest first.

    Slices are keyed by recipient id, so two recipients that share a display
    name stay separate unless ``merge_same_names`` is set. Donations whose
    recipient is missing or unknown all land in one ``"Unknown"`` slice.
    Ties keep first-encounter order. Returns ``[]`` when the grand total is 0.
    """

    names = {r.id: r.name for r in recipients or () if r.id is not None}

    groups: dict[Hashable, list] = {}
    for donation in donations or ():
        name = names.get(donation.recipient_id, UNKNOWN_RECIPIENT)
        resolved_id = donation.recipient_id if donation.recipient_id in names else None
        if merge_same_names:
            key: Hashable = ("name", name)
        elif resolved_id is None:
            key = ("unknown",)
        else:
            key = ("id", resolved_id)
        entry = groups.get(key)
        if entry is None:
            groups[key] = [name, resolved_id, donation.amount]
        else:
            entry[2] += donation.amount

    total = sum((entry[2] for entry in groups.values()), Decimal("0"))
    if total <= 0:
        return []

    ranked = sorted(groups.values(), key=lambda entry: entry[2], reverse=True)
    return [
        CategorySlice(
            name=name,
            value=value,
            percentage=float(value / total * 100),
            color_index=rank % len(SLICE_PALETTE),
            recipient_id=None if merge_same_names else recipient_id,
            label=f"{name}: {format_money(value, currency)}",
        )
        for rank, (name, recipient_id, value) in enumerate(ranked)
    ]


__all__ = ["CategorySlice", "SLICE_PALETTE", "UNKNOWN_RECIPIENT", "aggregate_by_recipient"]
