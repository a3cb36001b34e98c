"""Repository protocol definitions for domain layer."""

from .donation import DonationRepository
from .income import IncomeRepository
from .recipient import RecipientRepository
from .settings import SettingsRepository

__all__ = [
    "DonationRepository",
    "IncomeRepository",
    "RecipientRepository",
    "SettingsRepository",
]
