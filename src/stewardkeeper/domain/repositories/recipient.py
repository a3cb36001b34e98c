"""Recipient repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.recipient import Recipient


class RecipientRepository(Protocol):
    """Repository for managing recipient entities."""

    def get_by_id(self, recipient_id: int) -> Optional[Recipient]:
        """Retrieve a recipient by ID."""
        ...

    def get_default(self) -> Optional[Recipient]:
        """Return the recipient flagged as default, if any."""
        ...

    def list_all(self) -> list[Recipient]:
        """List recipients ordered by name."""
        ...

    def create(self, recipient: Recipient) -> Recipient:
        """Create a new recipient."""
        ...

    def update(self, recipient: Recipient) -> Recipient:
        """Update an existing recipient."""
        ...

    def delete(self, recipient_id: int) -> None:
        """Delete a recipient by ID."""
        ...
