"""
Simplified dependency injection container for the service.
"""

import logging
from typing import Any, Dict, Optional

from telegram import Bot

from metalbaza.application.use_cases.cart_management_use_case import CartManagementUseCase
from metalbaza.application.use_cases.order_creation_use_case import OrderCreationUseCase
from metalbaza.application.use_cases.order_query_use_case import OrderQueryUseCase
from metalbaza.application.use_cases.order_status_management_use_case import (
    OrderStatusManagementUseCase,
)
from metalbaza.infrastructure.configuration.config import Settings, get_config
from metalbaza.infrastructure.repositories import (
    SQLAlchemyCartRepository,
    SQLAlchemyCompanySettingsRepository,
    SQLAlchemyOrderRepository,
    SQLAlchemyProductRepository,
    SQLAlchemyUserRepository,
)
from metalbaza.infrastructure.services.admin_notification_service import AdminNotificationService

logger = logging.getLogger(__name__)


class Container:
    """Simple dependency injection container"""

    _instance: Optional["Container"] = None

    def __new__(cls) -> "Container":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self) -> None:
        """Initialize the container"""
        self.config: Settings = get_config()
        self.services: Dict[str, Any] = {}
        self._bot: Optional[Bot] = None

    @classmethod
    def reset(cls) -> None:
        """Forget the singleton so the next access rebuilds everything"""
        cls._instance = None

    def _get(self, name: str, factory):
        if name not in self.services:
            logger.debug("🏗️ Building %s", name)
            self.services[name] = factory()
        return self.services[name]

    def set_bot(self, bot: Optional[Bot]) -> None:
        """Set the bot instance"""
        self._bot = bot
        self.services.pop("admin_notification_service", None)
        self.services.pop("order_creation_use_case", None)

    def get_bot(self) -> Optional[Bot]:
        """Get the bot instance, created from BOT_TOKEN when configured"""
        if self._bot is None and self.config.bot_token:
            self._bot = Bot(token=self.config.bot_token)
        return self._bot

    # Repositories

    def get_cart_repository(self) -> SQLAlchemyCartRepository:
        return self._get("cart_repository", SQLAlchemyCartRepository)

    def get_product_repository(self) -> SQLAlchemyProductRepository:
        return self._get("product_repository", SQLAlchemyProductRepository)

    def get_order_repository(self) -> SQLAlchemyOrderRepository:
        return self._get("order_repository", SQLAlchemyOrderRepository)

    def get_user_repository(self) -> SQLAlchemyUserRepository:
        return self._get("user_repository", SQLAlchemyUserRepository)

    def get_company_settings_repository(self) -> SQLAlchemyCompanySettingsRepository:
        return self._get("company_settings_repository", SQLAlchemyCompanySettingsRepository)

    # Services

    def get_admin_notification_service(self) -> Optional[AdminNotificationService]:
        """Notification service, None when no bot or admin chat is configured"""
        if self.config.admin_chat_id is None:
            return None
        bot = self.get_bot()
        if bot is None:
            return None
        return self._get(
            "admin_notification_service",
            lambda: AdminNotificationService(
                bot, self.config.admin_chat_id, language=self.config.default_language
            ),
        )

    # Use cases

    def get_cart_management_use_case(self) -> CartManagementUseCase:
        return self._get(
            "cart_management_use_case",
            lambda: CartManagementUseCase(
                self.get_cart_repository(),
                self.get_product_repository(),
                currency=self.config.currency,
            ),
        )

    def get_order_creation_use_case(self) -> OrderCreationUseCase:
        return self._get(
            "order_creation_use_case",
            lambda: OrderCreationUseCase(
                self.get_cart_repository(),
                self.get_order_repository(),
                self.get_company_settings_repository(),
                self.get_user_repository(),
                self.get_admin_notification_service(),
                currency=self.config.currency,
                language=self.config.default_language,
            ),
        )

    def get_order_query_use_case(self) -> OrderQueryUseCase:
        return self._get(
            "order_query_use_case", lambda: OrderQueryUseCase(self.get_order_repository())
        )

    def get_order_status_use_case(self) -> OrderStatusManagementUseCase:
        return self._get(
            "order_status_use_case",
            lambda: OrderStatusManagementUseCase(self.get_order_repository()),
        )


def get_container() -> Container:
    """Get the global container instance"""
    return Container()
