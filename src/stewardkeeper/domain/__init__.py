"""Domain types shared by the storage layer and reporting services."""

from .errors import ReportInputError
from .periods import DateRange, RangeKind, TimeRange
from .records import (
    DonationRecord,
    DonationType,
    IncomeRecord,
    RecipientCategory,
    RecipientRecord,
)

__all__ = [
    "DateRange",
    "DonationRecord",
    "DonationType",
    "IncomeRecord",
    "RangeKind",
    "RecipientCategory",
    "RecipientRecord",
    "ReportInputError",
    "TimeRange",
]
