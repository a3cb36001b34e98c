"""Income repository protocol."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol

from ...models.income import Income


class IncomeRepository(Protocol):
    """Repository for managing income entities."""

    def get_by_id(self, income_id: int) -> Optional[Income]:
        """Retrieve an income entry by ID."""
        ...

    def filter_by_date_range(self, start_date: date | str, end_date: date | str) -> list[Income]:
        """Get income dated within ``[start_date, end_date]``, newest first."""
        ...

    def list_unprocessed(self) -> list[Income]:
        """Income not yet tithed against."""
        ...

    def unprocessed_total(self) -> Decimal:
        """Sum of unprocessed income amounts (0 when none)."""
        ...

    def mark_processed(self, income_id: int) -> Optional[Income]:
        """Flag an income entry as tithed against."""
        ...

    def create(self, income: Income) -> Income:
        """Create a new income entry."""
        ...

    def delete(self, income_id: int) -> None:
        """Delete an income entry by ID."""
        ...
