"""Report settings parsing tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from stewardkeeper.domain.errors import SettingValueError
from stewardkeeper.services.settings import (
    DEFAULT_TITHE_RATE,
    ReportSettings,
    load_report_settings,
    parse_report_settings,
    validate_setting,
)


def test_defaults_when_empty():
    assert parse_report_settings({}) == ReportSettings()
    assert ReportSettings().tithe_rate == Decimal("10")


def test_parses_stored_strings():
    settings = parse_report_settings(
        {"currency": "eur", "tithePercentage": "12.5", "monthlyGoal": "300", "annualGoal": "4000"}
    )

    assert settings.currency == "EUR"
    assert settings.tithe_rate == Decimal("12.5")
    assert settings.monthly_goal == Decimal("300")
    assert settings.annual_goal == Decimal("4000")


def test_unparsable_or_negative_rate_falls_back(caplog):
    assert parse_report_settings({"tithePercentage": "ten"}).tithe_rate == DEFAULT_TITHE_RATE
    assert parse_report_settings({"tithePercentage": "-3"}).tithe_rate == DEFAULT_TITHE_RATE
    assert parse_report_settings({"tithePercentage": "NaN"}).tithe_rate == DEFAULT_TITHE_RATE
    assert "using default" in caplog.text


def test_load_from_repository(settings_repo):
    settings_repo.set("tithePercentage", "15")

    settings = load_report_settings(settings_repo)

    assert settings.tithe_rate == Decimal("15")
    assert settings.currency == "USD"


def test_rate_above_hundred_falls_back(caplog):
    assert parse_report_settings({"tithePercentage": "150"}).tithe_rate == DEFAULT_TITHE_RATE
    assert parse_report_settings({"tithePercentage": "100"}).tithe_rate == Decimal("100")
    assert "using default" in caplog.text


def test_validate_setting_normalizes_values():
    assert validate_setting("currency", " eur ") == "EUR"
    assert validate_setting("tithePercentage", "12.5") == "12.5"
    assert validate_setting("annualGoal", "250000") == "250000"


@pytest.mark.parametrize(
    ("key", "raw"),
    [
        ("tithePercentage", "abc"),
        ("tithePercentage", "100.01"),
        ("tithePercentage", "-1"),
        ("monthlyGoal", "xyz"),
        ("annualGoal", "Infinity"),
        ("currency", "  "),
    ],
)
def test_validate_setting_rejects_bad_values(key, raw):
    with pytest.raises(SettingValueError):
        validate_setting(key, raw)
