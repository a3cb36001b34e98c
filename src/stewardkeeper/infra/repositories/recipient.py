"""SQLModel implementation of Recipient repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...logging_config import get_logger
from ...models.recipient import Recipient

logger = get_logger(__name__)


class SQLModelRecipientRepository:
    """SQLModel-based recipient repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get_by_id(self, recipient_id: int) -> Optional[Recipient]:
        with self.session_factory() as session:
            obj = session.get(Recipient, recipient_id)
            if obj:
                session.expunge(obj)
            return obj

    def get_default(self) -> Optional[Recipient]:
        with self.session_factory() as session:
            obj = session.exec(
                select(Recipient).where(Recipient.is_default == True)  # noqa: E712
            ).first()
            if obj:
                session.expunge(obj)
            return obj

    def list_all(self) -> list[Recipient]:
        with self.session_factory() as session:
            rows = list(session.exec(select(Recipient).order_by(Recipient.name)).all())
            session.expunge_all()
            return rows

    def create(self, recipient: Recipient) -> Recipient:
        with self.session_factory() as session:
            if recipient.is_default:
                self._clear_default(session)
            session.add(recipient)
            session.commit()
            session.refresh(recipient)
            session.expunge(recipient)
        logger.info("Recipient created", extra={"recipient_id": recipient.id})
        return recipient

    def update(self, recipient: Recipient) -> Recipient:
        with self.session_factory() as session:
            if recipient.is_default:
                self._clear_default(session, keep_id=recipient.id)
            merged = session.merge(recipient)
            session.commit()
            session.refresh(merged)
            session.expunge(merged)
            return merged

    def delete(self, recipient_id: int) -> None:
        """Delete a recipient; its donations remain and report as "Unknown"."""
        with self.session_factory() as session:
            recipient = session.get(Recipient, recipient_id)
            if recipient:
                session.delete(recipient)
                session.commit()
                logger.info("Recipient deleted", extra={"recipient_id": recipient_id})

    @staticmethod
    def _clear_default(session: Session, keep_id: int | None = None) -> None:
        # Only one recipient may be the default.
        for other in session.exec(
            select(Recipient).where(Recipient.is_default == True)  # noqa: E712
        ).all():
            if other.id != keep_id:
                other.is_default = False
                session.add(other)
