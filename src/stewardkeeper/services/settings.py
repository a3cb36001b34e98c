"""Report settings parsed from stored user preferences.

This is the validation boundary for preferences: everything downstream receives
an already-validated ``ReportSettings`` value as an explicit argument.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Mapping, Protocol

from ..domain.errors import SettingValueError
from ..logging_config import get_logger
from ..models.settings import DEFAULT_SETTINGS

logger = get_logger(__name__)

DEFAULT_TITHE_RATE = Decimal(DEFAULT_SETTINGS["tithePercentage"])
DEFAULT_MONTHLY_GOAL = Decimal(DEFAULT_SETTINGS["monthlyGoal"])
DEFAULT_ANNUAL_GOAL = Decimal(DEFAULT_SETTINGS["annualGoal"])


class SettingsSource(Protocol):
    def all(self) -> dict[str, str]:  # pragma: no cover - interface
        ...


@dataclass(frozen=True, slots=True)
class ReportSettings:
    currency: str = DEFAULT_SETTINGS["currency"]
    tithe_rate: Decimal = DEFAULT_TITHE_RATE
    monthly_goal: Decimal = DEFAULT_MONTHLY_GOAL
    annual_goal: Decimal = DEFAULT_ANNUAL_GOAL


_NUMERIC_LIMITS = {
    "tithePercentage": Decimal("100"),
    "monthlyGoal": None,
    "annualGoal": None,
}


def validate_setting(key: str, raw: str) -> str:
    """Return the normalized value to store for ``key`` or raise ``SettingValueError``."""

    text = str(raw).strip()
    if key == "currency":
        if not text:
            raise SettingValueError("currency must not be empty")
        return text.upper()
    if key not in _NUMERIC_LIMITS:
        raise SettingValueError(f"Unknown setting {key!r}")
    try:
        value = Decimal(text)
    except InvalidOperation as exc:
        raise SettingValueError(f"{key} must be a number, got {raw!r}") from exc
    upper = _NUMERIC_LIMITS[key]
    if not value.is_finite() or value < 0 or (upper is not None and value > upper):
        limit = f"between 0 and {upper}" if upper is not None else "0 or more"
        raise SettingValueError(f"{key} must be {limit}, got {raw!r}")
    return text


def _parse_number(raw: str | None, *, key: str, default: Decimal) -> Decimal:
    if raw is None or not str(raw).strip():
        return default
    try:
        return Decimal(validate_setting(key, raw))
    except SettingValueError:
        logger.warning("Invalid setting; using default", extra={"key": key, "value": raw})
        return default


def parse_report_settings(values: Mapping[str, str]) -> ReportSettings:
    """Build ``ReportSettings`` from raw key/value strings, falling back to defaults."""

    currency = (values.get("currency") or "").strip().upper() or DEFAULT_SETTINGS["currency"]
    return ReportSettings(
        currency=currency,
        tithe_rate=_parse_number(
            values.get("tithePercentage"), key="tithePercentage", default=DEFAULT_TITHE_RATE
        ),
        monthly_goal=_parse_number(
            values.get("monthlyGoal"), key="monthlyGoal", default=DEFAULT_MONTHLY_GOAL
        ),
        annual_goal=_parse_number(
            values.get("annualGoal"), key="annualGoal", default=DEFAULT_ANNUAL_GOAL
        ),
    )


def load_report_settings(repository: SettingsSource) -> ReportSettings:
    return parse_report_settings(repository.all())


__all__ = [
    "DEFAULT_ANNUAL_GOAL",
    "DEFAULT_MONTHLY_GOAL",
    "DEFAULT_TITHE_RATE",
    "ReportSettings",
    "load_report_settings",
    "parse_report_settings",
    "validate_setting",
]
