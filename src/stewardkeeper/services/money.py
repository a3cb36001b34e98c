"""Money rounding and display helpers."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def quantize_money(value: Decimal) -> Decimal:
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(value: Decimal, currency: str) -> str:
    """Render ``value`` as ``"<CUR> 1234.50"``."""
    return f"{currency} {quantize_money(value)}"
