"""SQLModel definition for giving recipients."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class Recipient(SQLModel, table=True):
    """A church, charity, or person that receives donations."""

    __tablename__: ClassVar[str] = "recipient"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, nullable=False, max_length=128)
    category: str = Field(default="Church", nullable=False, max_length=32)
    notes: str = Field(default="", max_length=255)
    is_default: bool = Field(default=False, nullable=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), nullable=False)
