"""SQLModel implementation of Donation repository."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Callable, Optional

from sqlmodel import Session, select

from ...domain.periods import DateRange
from ...logging_config import get_logger
from ...models.donation import Donation

logger = get_logger(__name__)


class SQLModelDonationRepository:
    """SQLModel-based donation repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get_by_id(self, donation_id: int) -> Optional[Donation]:
        with self.session_factory() as session:
            obj = session.get(Donation, donation_id)
            if obj:
                session.expunge(obj)
            return obj

    def filter_by_date_range(self, start_date: date | str, end_date: date | str) -> list[Donation]:
        """Get donations within an inclusive date range, newest first."""
        window = DateRange(start_date, end_date)
        with self.session_factory() as session:
            statement = (
                select(Donation)
                .where(Donation.occurred_on >= window.start)
                .where(Donation.occurred_on <= window.end)
                .order_by(Donation.occurred_on.desc(), Donation.id.desc())  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def list_by_recipient(self, recipient_id: int) -> list[Donation]:
        with self.session_factory() as session:
            statement = (
                select(Donation)
                .where(Donation.recipient_id == recipient_id)
                .order_by(Donation.occurred_on.desc())  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def total_between(self, start_date: date | str, end_date: date | str) -> Decimal:
        """Sum donation amounts in the window; an empty window sums to 0."""
        rows = self.filter_by_date_range(start_date, end_date)
        return sum((Decimal(row.amount) for row in rows), Decimal("0"))

    def create(self, donation: Donation) -> Donation:
        with self.session_factory() as session:
            session.add(donation)
            session.commit()
            session.refresh(donation)
            session.expunge(donation)
        logger.info(
            "Donation recorded",
            extra={"donation_id": donation.id, "occurred_on": donation.occurred_on},
        )
        return donation

    def update(self, donation: Donation) -> Donation:
        with self.session_factory() as session:
            merged = session.merge(donation)
            session.commit()
            session.refresh(merged)
            session.expunge(merged)
            return merged

    def delete(self, donation_id: int) -> None:
        with self.session_factory() as session:
            donation = session.get(Donation, donation_id)
            if donation:
                session.delete(donation)
                session.commit()
                logger.info("Donation deleted", extra={"donation_id": donation_id})
