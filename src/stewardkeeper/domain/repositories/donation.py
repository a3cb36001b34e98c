"""Donation repository protocol."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol

from ...models.donation import Donation


class DonationRepository(Protocol):
    """Repository for managing donation entities."""

    def get_by_id(self, donation_id: int) -> Optional[Donation]:
        """Retrieve a donation by ID."""
        ...

    def filter_by_date_range(self, start_date: date | str, end_date: date | str) -> list[Donation]:
        """Get donations dated within ``[start_date, end_date]``, newest first."""
        ...

    def list_by_recipient(self, recipient_id: int) -> list[Donation]:
        """Get all donations given to a recipient."""
        ...

    def total_between(self, start_date: date | str, end_date: date | str) -> Decimal:
        """Sum donation amounts within ``[start_date, end_date]``."""
        ...

    def create(self, donation: Donation) -> Donation:
        """Create a new donation."""
        ...

    def update(self, donation: Donation) -> Donation:
        """Update an existing donation."""
        ...

    def delete(self, donation_id: int) -> None:
        """Delete a donation by ID."""
        ...
