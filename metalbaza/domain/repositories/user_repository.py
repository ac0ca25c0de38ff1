"""
User repository interface

Users are registered elsewhere; checkout only needs to resolve an identity.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from metalbaza.domain.value_objects.telegram_id import TelegramId


@dataclass(frozen=True)
class UserInfo:
    """Minimal user view used for authorization and localization"""

    id: int
    telegram_id: int | None
    first_name: str
    last_name: str
    phone: str
    role: str = "client"
    language: str = "uz"

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class UserRepository(ABC):
    """Repository interface for user lookups"""

    @abstractmethod
    async def find_by_telegram_id(self, telegram_id: TelegramId) -> Optional[UserInfo]:
        """Find a user by their Telegram ID"""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[UserInfo]:
        """Find a user by primary key"""
