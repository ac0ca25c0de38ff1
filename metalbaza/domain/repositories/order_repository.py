"""
Order repository interface

Defines the contract for order data access operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from metalbaza.domain.entities.order_entity import Order, OrderDraft
from metalbaza.domain.value_objects.identifiers import OrderId, UserId
from metalbaza.domain.value_objects.order_status import OrderStatus


class OrderRepository(ABC):
    """Repository interface for order operations"""

    @abstractmethod
    async def create_order(self, draft: OrderDraft) -> Order:
        """Persist the order and its items and clear the priced cart lines.

        All three happen in one transaction. If the cart no longer matches
        ``draft.cart_snapshot()`` nothing is written.
        """

    @abstractmethod
    async def get_order(self, order_id: OrderId) -> Optional[Order]:
        """Get order with its items by ID"""

    @abstractmethod
    async def list_orders_for_user(self, user_id: UserId) -> List[Order]:
        """Orders of one user, newest first"""

    @abstractmethod
    async def list_orders(
        self, limit: int = 100, status: Optional[OrderStatus] = None
    ) -> List[Order]:
        """All orders with optional status filtering, newest first"""

    @abstractmethod
    async def update_status(
        self,
        order_id: OrderId,
        status: OrderStatus,
        expected_status: Optional[OrderStatus] = None,
    ) -> Optional[Order]:
        """Set order status, None if the order does not exist.

        With ``expected_status`` the write only happens while the stored
        status still equals it, otherwise InvalidStatusTransitionError.
        """
