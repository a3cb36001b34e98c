"""SQLModel table exports."""

from .donation import Donation
from .income import Income
from .recipient import Recipient
from .settings import DEFAULT_SETTINGS, AppSetting

__all__ = [
    "AppSetting",
    "DEFAULT_SETTINGS",
    "Donation",
    "Income",
    "Recipient",
]
