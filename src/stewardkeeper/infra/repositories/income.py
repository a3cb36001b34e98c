"""SQLModel implementation of Income repository."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Callable, Optional

from sqlmodel import Session, select

from ...domain.periods import DateRange
from ...logging_config import get_logger
from ...models.income import Income

logger = get_logger(__name__)


class SQLModelIncomeRepository:
    """SQLModel-based income repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get_by_id(self, income_id: int) -> Optional[Income]:
        with self.session_factory() as session:
            obj = session.get(Income, income_id)
            if obj:
                session.expunge(obj)
            return obj

    def filter_by_date_range(self, start_date: date | str, end_date: date | str) -> list[Income]:
        """Get income within an inclusive date range, newest first."""
        window = DateRange(start_date, end_date)
        with self.session_factory() as session:
            statement = (
                select(Income)
                .where(Income.occurred_on >= window.start)
                .where(Income.occurred_on <= window.end)
                .order_by(Income.occurred_on.desc(), Income.id.desc())  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def list_unprocessed(self) -> list[Income]:
        with self.session_factory() as session:
            statement = (
                select(Income)
                .where(Income.processed == False)  # noqa: E712
                .order_by(Income.occurred_on)  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def unprocessed_total(self) -> Decimal:
        return sum((Decimal(row.amount) for row in self.list_unprocessed()), Decimal("0"))

    def mark_processed(self, income_id: int) -> Optional[Income]:
        """Flag an income entry as tithed against; repeated calls are no-ops."""
        with self.session_factory() as session:
            income = session.get(Income, income_id)
            if income is None:
                return None
            if not income.processed:
                income.processed = True
                session.add(income)
                session.commit()
                session.refresh(income)
                logger.info("Income marked processed", extra={"income_id": income_id})
            session.expunge(income)
            return income

    def create(self, income: Income) -> Income:
        with self.session_factory() as session:
            session.add(income)
            session.commit()
            session.refresh(income)
            session.expunge(income)
        logger.info(
            "Income recorded",
            extra={"income_id": income.id, "occurred_on": income.occurred_on},
        )
        return income

    def delete(self, income_id: int) -> None:
        with self.session_factory() as session:
            income = session.get(Income, income_id)
            if income:
                session.delete(income)
                session.commit()
                logger.info("Income deleted", extra={"income_id": income_id})
