"""
Order Query Use Case

Order history for customers and order listings for administrators.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from metalbaza.application.use_cases.cart_management_use_case import to_user_id
from metalbaza.application.use_cases.order_status_management_use_case import (
    parse_status,
    to_order_id,
)
from metalbaza.domain.entities.order_entity import Order
from metalbaza.domain.repositories.order_repository import OrderRepository
from metalbaza.infrastructure.utilities.constants import BusinessSettings
from metalbaza.infrastructure.utilities.exceptions import DatabaseError, OrderNotFoundError


class OrderQueryUseCase:
    """Read-only access to materialized orders"""

    def __init__(self, order_repository: OrderRepository):
        self._order_repository = order_repository
        self._logger = logging.getLogger(self.__class__.__name__)

    async def list_user_orders(self, user_id: int) -> List[Order]:
        """The user's own orders, newest first"""
        try:
            return await self._order_repository.list_orders_for_user(to_user_id(user_id))
        except SQLAlchemyError as e:
            self._logger.error("💥 ORDER HISTORY FAILED: %s", e, exc_info=True)
            raise DatabaseError(f"Failed to load orders: {e}", "list_orders_for_user") from e

    async def get_user_order(self, user_id: int, order_id: int) -> Order:
        """One order of the user; other users' orders look missing"""
        try:
            order = await self._order_repository.get_order(to_order_id(order_id))
        except SQLAlchemyError as e:
            self._logger.error("💥 ORDER LOOKUP FAILED: %s", e, exc_info=True)
            raise DatabaseError(f"Failed to load order: {e}", "get_order") from e

        if order is None or order.user_id != user_id:
            self._logger.info("📭 ORDER %s NOT VISIBLE to user %s", order_id, user_id)
            raise OrderNotFoundError(order_id)
        return order

    async def list_all_orders(
        self,
        status: Optional[str] = None,
        limit: int = BusinessSettings.DEFAULT_ORDER_LIST_LIMIT,
    ) -> List[Order]:
        """Administrative listing, optionally filtered by status"""
        status_filter = parse_status(status) if status else None
        limit = max(1, min(limit, BusinessSettings.MAX_ORDER_LIST_LIMIT))

        try:
            orders = await self._order_repository.list_orders(limit=limit, status=status_filter)
        except SQLAlchemyError as e:
            self._logger.error("💥 ORDER LISTING FAILED: %s", e, exc_info=True)
            raise DatabaseError(f"Failed to list orders: {e}", "list_orders") from e

        self._logger.info("📋 LISTED %d ORDERS (status=%s)", len(orders), status_filter)
        return orders
