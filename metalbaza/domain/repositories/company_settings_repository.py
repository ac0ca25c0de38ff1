"""
Company settings repository interface
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CompanySettings:
    """Store-wide switches"""

    is_delivery: bool = False


class CompanySettingsRepository(ABC):
    """Repository interface for the single company settings row"""

    @abstractmethod
    async def get_settings(self) -> CompanySettings:
        """Current settings, defaults when none are stored"""

    @abstractmethod
    async def update_settings(self, settings: CompanySettings) -> CompanySettings:
        """Store new settings, creating the row when none exists"""
