"""
SQLAlchemy User Repository
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from metalbaza.domain.repositories.user_repository import UserInfo, UserRepository
from metalbaza.domain.value_objects.telegram_id import TelegramId
from metalbaza.infrastructure.database.models import User as SQLUser
from metalbaza.infrastructure.repositories.mappers import to_user
from metalbaza.infrastructure.repositories.session_handler import managed_session


class SQLAlchemyUserRepository(UserRepository):
    """SQLAlchemy implementation of user lookups"""

    def __init__(self):
        self._logger = logging.getLogger(self.__class__.__name__)

    async def find_by_telegram_id(self, telegram_id: TelegramId) -> Optional[UserInfo]:
        try:
            with managed_session() as session:
                row = session.query(SQLUser).filter(SQLUser.telegram_id == telegram_id.value).first()
                return to_user(row) if row else None

        except SQLAlchemyError as e:
            self._logger.error("💥 DATABASE ERROR finding user by telegram ID: %s", e)
            raise

    async def find_by_id(self, user_id: int) -> Optional[UserInfo]:
        try:
            with managed_session() as session:
                row = session.get(SQLUser, user_id)
                return to_user(row) if row else None

        except SQLAlchemyError as e:
            self._logger.error("💥 DATABASE ERROR finding user by ID: %s", e)
            raise
