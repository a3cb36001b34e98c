"""Service module exports."""

from . import (
    bucketing,
    categories,
    export,
    goals,
    money,
    obligations,
    reports,
    series,
    settings,
)

__all__ = [
    "bucketing",
    "categories",
    "export",
    "goals",
    "money",
    "obligations",
    "reports",
    "series",
    "settings",
]
