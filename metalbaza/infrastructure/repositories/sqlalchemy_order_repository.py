"""
SQLAlchemy Order Repository

Concrete implementation of OrderRepository using SQLAlchemy ORM.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from metalbaza.domain.entities.order_entity import Order, OrderDraft
from metalbaza.domain.repositories.order_repository import OrderRepository
from metalbaza.domain.value_objects.identifiers import OrderId, UserId
from metalbaza.domain.value_objects.order_status import OrderStatus
from metalbaza.infrastructure.database.models import CartItem as SQLCartItem
from metalbaza.infrastructure.database.models import Order as SQLOrder
from metalbaza.infrastructure.database.models import OrderItem as SQLOrderItem
from metalbaza.infrastructure.logging.logging_config import PerformanceLogger
from metalbaza.infrastructure.repositories.mappers import to_order
from metalbaza.infrastructure.repositories.session_handler import managed_session
from metalbaza.infrastructure.utilities.exceptions import (
    CartChangedError,
    InvalidStatusTransitionError,
)


class SQLAlchemyOrderRepository(OrderRepository):
    """SQLAlchemy implementation of OrderRepository"""

    def __init__(self):
        self._logger = logging.getLogger(self.__class__.__name__)

    async def create_order(self, draft: OrderDraft) -> Order:
        """Insert order and items and clear the cart in one transaction"""
        self._logger.info(
            "📝 CREATE ORDER: User %s, %d lines, total=%s, delivery=%s",
            draft.user_id,
            len(draft.lines),
            draft.total_amount.amount,
            draft.delivery_amount.amount,
        )

        try:
            with PerformanceLogger("create_order", self._logger, {"user_id": draft.user_id}):
                with managed_session("create_order") as session:
                    self._verify_cart_snapshot(session, draft)

                    order = SQLOrder(
                        user_id=draft.user_id,
                        total_amount=draft.total_amount.amount,
                        delivery_amount=draft.delivery_amount.amount,
                        is_delivery=draft.is_delivery,
                        delivery_address=draft.delivery_address,
                        delivery_latitude=draft.delivery_latitude,
                        delivery_longitude=draft.delivery_longitude,
                        notes=draft.notes,
                        status=OrderStatus.PENDING.value,
                    )
                    session.add(order)
                    session.flush()  # Get order ID

                    self._logger.info("🆕 ORDER ROW CREATED: ID=%s", order.id)

                    for line in draft.lines:
                        order.order_items.append(
                            SQLOrderItem(
                                product_id=line.product_id,
                                product_name=line.product_name,
                                quantity=line.quantity,
                                price_per_unit=line.price_per_unit.amount,
                                total_price=line.total_price.amount,
                                delivery_fee=line.delivery_fee.amount,
                            )
                        )
                    session.flush()

                    cleared = session.execute(
                        delete(SQLCartItem).where(
                            SQLCartItem.user_id == draft.user_id,
                            SQLCartItem.product_id.in_(list(draft.cart_snapshot())),
                        )
                    ).rowcount
                    self._logger.info("🗑️ CART LINES CLEARED: %d", cleared)

                    result = to_order(order)

            self._logger.info("✅ ORDER CREATION SUCCESS: #%s", result.id)
            return result

        except SQLAlchemyError as e:
            self._logger.error("💥 DATABASE ERROR creating order: %s", e)
            raise

    def _verify_cart_snapshot(self, session, draft: OrderDraft) -> None:
        """Lock the user's cart rows and compare them with what was priced"""
        rows = (
            session.query(SQLCartItem.product_id, SQLCartItem.quantity)
            .filter(SQLCartItem.user_id == draft.user_id)
            .with_for_update()
            .all()
        )
        current = {product_id: quantity for product_id, quantity in rows}
        expected = draft.cart_snapshot()

        if current != expected:
            self._logger.warning(
                "⚠️ CART CHANGED during checkout: user=%s priced=%s current=%s",
                draft.user_id,
                expected,
                current,
            )
            raise CartChangedError(draft.user_id)

    async def get_order(self, order_id: OrderId) -> Optional[Order]:
        """Get order by ID"""
        self._logger.info("🔍 GET ORDER BY ID: %s", order_id.value)

        try:
            with managed_session() as session:
                order = (
                    session.query(SQLOrder)
                    .options(selectinload(SQLOrder.order_items))
                    .filter(SQLOrder.id == order_id.value)
                    .first()
                )
                if not order:
                    self._logger.info("📭 ORDER NOT FOUND: ID %s", order_id.value)
                    return None
                return to_order(order)

        except SQLAlchemyError as e:
            self._logger.error("💥 DATABASE ERROR getting order by ID: %s", e)
            raise

    async def list_orders_for_user(self, user_id: UserId) -> List[Order]:
        """Get orders of one user"""
        self._logger.info("📋 GET ORDERS BY USER: %s", user_id.value)

        try:
            with managed_session() as session:
                orders = (
                    session.query(SQLOrder)
                    .options(selectinload(SQLOrder.order_items))
                    .filter(SQLOrder.user_id == user_id.value)
                    .order_by(SQLOrder.created_at.desc(), SQLOrder.id.desc())
                    .all()
                )
                result = [to_order(order) for order in orders]

            self._logger.info("✅ FOUND %d ORDERS for user %s", len(result), user_id.value)
            return result

        except SQLAlchemyError as e:
            self._logger.error("💥 DATABASE ERROR getting orders by user: %s", e)
            raise

    async def list_orders(
        self, limit: int = 100, status: Optional[OrderStatus] = None
    ) -> List[Order]:
        """Get all orders with optional filtering"""
        self._logger.info("📋 GET ALL ORDERS: limit=%d, status=%s", limit, status)

        try:
            with managed_session() as session:
                query = session.query(SQLOrder).options(selectinload(SQLOrder.order_items))
                if status is not None:
                    query = query.filter(SQLOrder.status == status.value)
                orders = query.order_by(SQLOrder.created_at.desc(), SQLOrder.id.desc()).limit(limit).all()
                return [to_order(order) for order in orders]

        except SQLAlchemyError as e:
            self._logger.error("💥 DATABASE ERROR getting all orders: %s", e)
            raise

    async def update_status(
        self,
        order_id: OrderId,
        status: OrderStatus,
        expected_status: Optional[OrderStatus] = None,
    ) -> Optional[Order]:
        """Update order status, optionally only from an expected current status"""
        self._logger.info("🔄 UPDATE ORDER STATUS: %s → %s", order_id.value, status.value)

        try:
            with managed_session("update_status") as session:
                order = (
                    session.query(SQLOrder)
                    .filter(SQLOrder.id == order_id.value)
                    .with_for_update()
                    .first()
                )
                if not order:
                    self._logger.info("📭 ORDER NOT FOUND: ID %s", order_id.value)
                    return None

                if expected_status is not None and order.status != expected_status.value:
                    raise InvalidStatusTransitionError(order.status, status.value)

                order.status = status.value
                session.flush()
                session.refresh(order)
                result = to_order(order)

            self._logger.info("✅ ORDER STATUS UPDATED: #%s is %s", order_id.value, status.value)
            return result

        except SQLAlchemyError as e:
            self._logger.error("💥 DATABASE ERROR updating order status: %s", e)
            raise
