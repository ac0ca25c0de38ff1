"""
Order Status Management Use Case

Handles administrative order status transitions.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from metalbaza.application.dtos.order_dtos import UpdateOrderStatusRequest
from metalbaza.domain.entities.order_entity import Order
from metalbaza.domain.repositories.order_repository import OrderRepository
from metalbaza.domain.value_objects.identifiers import OrderId
from metalbaza.domain.value_objects.order_status import OrderStatus
from metalbaza.infrastructure.utilities.exceptions import (
    DatabaseError,
    InvalidStatusTransitionError,
    OrderNotFoundError,
    ValidationError,
)


def parse_status(value: str) -> OrderStatus:
    try:
        return OrderStatus.parse(value)
    except ValueError as e:
        raise ValidationError(str(e), field="status") from e


def to_order_id(value: int) -> OrderId:
    try:
        return OrderId(value)
    except ValueError as e:
        raise OrderNotFoundError(value) from e


class OrderStatusManagementUseCase:
    """Use case for managing order status transitions"""

    STATUS_EMOJIS = {
        OrderStatus.PENDING: "⏳",
        OrderStatus.CONFIRMED: "✅",
        OrderStatus.PROCESSING: "🏗️",
        OrderStatus.COMPLETED: "🏁",
        OrderStatus.CANCELLED: "❌",
    }

    def __init__(self, order_repository: OrderRepository):
        self._order_repository = order_repository
        self._logger = logging.getLogger(self.__class__.__name__)

    async def update_order_status(self, request: UpdateOrderStatusRequest) -> Order:
        """Move an order to a new status if the state machine allows it"""
        self._logger.info(
            "📝 STATUS UPDATE: Order %s → %s by Admin %s",
            request.order_id,
            request.status,
            request.admin_user_id,
        )

        new_status = parse_status(request.status)
        order_id = to_order_id(request.order_id)

        try:
            order = await self._order_repository.get_order(order_id)
            if order is None:
                raise OrderNotFoundError(order_id.value)

            if not order.status.can_transition_to(new_status):
                self._logger.warning(
                    "🚫 INVALID TRANSITION: Order %s %s → %s",
                    order_id.value,
                    order.status.value,
                    new_status.value,
                )
                raise InvalidStatusTransitionError(order.status.value, new_status.value)

            updated = await self._order_repository.update_status(
                order_id, new_status, expected_status=order.status
            )
        except SQLAlchemyError as e:
            self._logger.error("💥 STATUS UPDATE FAILED: %s", e, exc_info=True)
            raise DatabaseError(f"Failed to update order status: {e}", "update_status") from e

        if updated is None:
            raise OrderNotFoundError(order_id.value)

        self._logger.info(
            "%s ORDER %s is now %s",
            self.STATUS_EMOJIS[new_status],
            order_id.value,
            new_status.value,
        )
        return updated
