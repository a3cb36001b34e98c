"""SQLModel repository implementations."""

from .donation import SQLModelDonationRepository
from .income import SQLModelIncomeRepository
from .recipient import SQLModelRecipientRepository
from .settings import SQLModelSettingsRepository

__all__ = [
    "SQLModelDonationRepository",
    "SQLModelIncomeRepository",
    "SQLModelRecipientRepository",
    "SQLModelSettingsRepository",
]
