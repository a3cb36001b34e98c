"""Pytest configuration and shared fixtures for StewardKeeper tests.

Database fixtures use a throwaway SQLite file per test; record helpers build
the immutable snapshots the reporting services consume.
"""

from __future__ import annotations

import tempfile
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

# Import all models to ensure they're registered with SQLModel metadata
from stewardkeeper.models import Donation, Income, Recipient  # noqa: F401
from stewardkeeper.domain.records import DonationRecord, IncomeRecord, RecipientRecord
from stewardkeeper.infra.repositories import (
    SQLModelDonationRepository,
    SQLModelIncomeRepository,
    SQLModelRecipientRepository,
    SQLModelSettingsRepository,
)

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching the ``Callable[[], Session]`` repositories expect."""

    def factory():
        return Session(db_engine, expire_on_commit=False)

    return factory


@pytest.fixture
def donation_repo(session_factory):
    return SQLModelDonationRepository(session_factory)


@pytest.fixture
def income_repo(session_factory):
    return SQLModelIncomeRepository(session_factory)


@pytest.fixture
def recipient_repo(session_factory):
    return SQLModelRecipientRepository(session_factory)


@pytest.fixture
def settings_repo(session_factory):
    repo = SQLModelSettingsRepository(session_factory)
    repo.ensure_defaults()
    return repo


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def recipient_factory(recipient_repo):
    """Factory for persisted recipients."""

    def _create(name: str = "Grace Church", category: str = "Church", is_default: bool = False):
        return recipient_repo.create(Recipient(name=name, category=category, is_default=is_default))

    return _create


@pytest.fixture
def donation_factory(donation_repo):
    """Factory for persisted donations."""

    def _create(
        amount: str | Decimal = "100.00",
        occurred_on: date = date(2025, 3, 10),
        recipient_id: int | None = None,
        donation_type: str = "Tithe",
        notes: str = "",
    ):
        return donation_repo.create(
            Donation(
                amount=Decimal(str(amount)),
                occurred_on=occurred_on,
                recipient_id=recipient_id,
                donation_type=donation_type,
                notes=notes,
            )
        )

    return _create


@pytest.fixture
def income_factory(income_repo):
    """Factory for persisted income entries."""

    def _create(
        amount: str | Decimal = "1000.00",
        occurred_on: date = date(2025, 3, 1),
        source: str = "Salary",
        processed: bool = False,
    ):
        return income_repo.create(
            Income(
                amount=Decimal(str(amount)),
                occurred_on=occurred_on,
                source=source,
                processed=processed,
            )
        )

    return _create


# =============================================================================
# Snapshot helpers
# =============================================================================


def donation(amount, on: date, recipient_id: int | None = None, *, id: int | None = None) -> DonationRecord:
    return DonationRecord(id=id, amount=Decimal(str(amount)), occurred_on=on, recipient_id=recipient_id)


def income(amount, on: date, *, processed: bool = False, id: int | None = None) -> IncomeRecord:
    return IncomeRecord(id=id, amount=Decimal(str(amount)), occurred_on=on, source="Salary", processed=processed)


def recipient(id: int, name: str) -> RecipientRecord:
    return RecipientRecord(id=id, name=name)


@pytest.fixture
def records():
    """Expose the snapshot helpers to tests without importing conftest."""

    class _Helpers:
        pass

    helpers = _Helpers()
    helpers.donation = donation
    helpers.income = income
    helpers.recipient = recipient
    return helpers
