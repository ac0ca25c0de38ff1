"""
SQLAlchemy Company Settings Repository
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from metalbaza.domain.repositories.company_settings_repository import (
    CompanySettings,
    CompanySettingsRepository,
)
from metalbaza.infrastructure.database.models import CompanySettings as SQLCompanySettings
from metalbaza.infrastructure.repositories.session_handler import managed_session


class SQLAlchemyCompanySettingsRepository(CompanySettingsRepository):
    """Reads and writes the single company settings row"""

    def __init__(self):
        self._logger = logging.getLogger(self.__class__.__name__)

    async def get_settings(self) -> CompanySettings:
        try:
            with managed_session() as session:
                row = session.query(SQLCompanySettings).order_by(SQLCompanySettings.id).first()
                if row is None:
                    self._logger.info("⚙️ NO COMPANY SETTINGS stored - using defaults")
                    return CompanySettings()
                return CompanySettings(is_delivery=bool(row.is_delivery))

        except SQLAlchemyError as e:
            self._logger.error("💥 DATABASE ERROR reading company settings: %s", e)
            raise

    async def update_settings(self, settings: CompanySettings) -> CompanySettings:
        try:
            with managed_session("update_company_settings") as session:
                row = (
                    session.query(SQLCompanySettings)
                    .order_by(SQLCompanySettings.id)
                    .with_for_update()
                    .first()
                )
                if row is None:
                    row = SQLCompanySettings()
                    session.add(row)
                row.is_delivery = settings.is_delivery
                session.flush()

                self._logger.info("⚙️ COMPANY SETTINGS UPDATED: delivery=%s", row.is_delivery)
                return CompanySettings(is_delivery=bool(row.is_delivery))

        except SQLAlchemyError as e:
            self._logger.error("💥 DATABASE ERROR updating company settings: %s", e)
            raise
