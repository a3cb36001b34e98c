"""Settings repository for app-level key/value pairs."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

from sqlmodel import Session, select

from ...logging_config import get_logger
from ...models.settings import DEFAULT_SETTINGS, AppSetting

logger = get_logger(__name__)


class SQLModelSettingsRepository:
    """SQLModel-based settings repository."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get(self, key: str) -> Optional[AppSetting]:
        with self.session_factory() as session:
            setting = session.get(AppSetting, key)
            if setting:
                session.expunge(setting)
            return setting

    def set(self, key: str, value: str) -> AppSetting:
        with self.session_factory() as session:
            setting = session.get(AppSetting, key)
            if setting:
                setting.value = value
                setting.updated_at = datetime.now(timezone.utc)
            else:
                setting = AppSetting(key=key, value=value)
            session.add(setting)
            session.commit()
            session.refresh(setting)
            session.expunge(setting)
        logger.info("Setting updated", extra={"key": key})
        return setting

    def all(self) -> dict[str, str]:
        with self.session_factory() as session:
            return {row.key: row.value for row in session.exec(select(AppSetting)).all()}

    def ensure_defaults(self) -> None:
        """Insert any missing default settings without touching existing ones."""
        with self.session_factory() as session:
            existing = {row.key for row in session.exec(select(AppSetting)).all()}
            for key, value in DEFAULT_SETTINGS.items():
                if key not in existing:
                    session.add(AppSetting(key=key, value=value))
            session.commit()

    def delete(self, key: str) -> None:
        with self.session_factory() as session:
            setting = session.get(AppSetting, key)
            if setting:
                session.delete(setting)
                session.commit()


__all__ = ["SQLModelSettingsRepository"]
