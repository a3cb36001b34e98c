"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from sqlmodel import Session

from .config import BaseConfig
from .infra.database import create_db_engine, create_session_factory, init_database
from .infra.repositories import (
    SQLModelDonationRepository,
    SQLModelIncomeRepository,
    SQLModelRecipientRepository,
    SQLModelSettingsRepository,
)
from .services.settings import ReportSettings, load_report_settings


@dataclass
class AppContext:
    """Configuration, session factory, and repositories for one process."""

    config: BaseConfig
    session_factory: Callable[[], Session]

    donation_repo: SQLModelDonationRepository
    income_repo: SQLModelIncomeRepository
    recipient_repo: SQLModelRecipientRepository
    settings_repo: SQLModelSettingsRepository

    def report_settings(self) -> ReportSettings:
        """Read preferences fresh from the store on every call."""
        return load_report_settings(self.settings_repo)


def create_app_context(config: Optional[BaseConfig] = None) -> AppContext:
    """Create the engine, ensure the schema exists, and wire repositories."""

    if config is None:
        config = BaseConfig()

    engine = create_db_engine(config)
    init_database(engine)
    session_factory = create_session_factory(engine)

    return AppContext(
        config=config,
        session_factory=session_factory,
        donation_repo=SQLModelDonationRepository(session_factory),
        income_repo=SQLModelIncomeRepository(session_factory),
        recipient_repo=SQLModelRecipientRepository(session_factory),
        settings_repo=SQLModelSettingsRepository(session_factory),
    )
