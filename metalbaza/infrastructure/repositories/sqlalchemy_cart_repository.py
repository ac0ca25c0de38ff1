"""
SQLAlchemy Cart Repository

Concrete implementation of CartRepository using SQLAlchemy ORM.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from metalbaza.domain.entities.cart_entity import CartLine
from metalbaza.domain.repositories.cart_repository import CartRepository
from metalbaza.domain.value_objects.identifiers import ProductId, UserId
from metalbaza.infrastructure.database.models import CartItem as SQLCartItem
from metalbaza.infrastructure.database.models import Product as SQLProduct
from metalbaza.infrastructure.repositories.mappers import to_cart_line
from metalbaza.infrastructure.repositories.session_handler import managed_session


class SQLAlchemyCartRepository(CartRepository):
    """SQLAlchemy implementation of cart repository"""

    def __init__(self):
        self._logger = logging.getLogger(self.__class__.__name__)

    async def list_items(self, user_id: UserId) -> List[CartLine]:
        """Get cart lines joined with live product rows"""
        self._logger.info("🔍 GET CART: Fetching cart for user %s", user_id.value)
        try:
            with managed_session() as session:
                rows = (
                    session.query(SQLCartItem, SQLProduct)
                    .join(SQLProduct, SQLCartItem.product_id == SQLProduct.id)
                    .filter(SQLCartItem.user_id == user_id.value)
                    .order_by(SQLCartItem.created_at.desc(), SQLCartItem.id.desc())
                    .all()
                )
                lines = [to_cart_line(item, product) for item, product in rows]

            self._logger.info("📦 CART FOUND: User %s has %d lines", user_id.value, len(lines))
            return lines

        except SQLAlchemyError as e:
            self._logger.error("💥 DATABASE ERROR fetching cart: %s", e)
            raise

    async def add_item(self, user_id: UserId, product_id: ProductId, quantity: int) -> CartLine:
        """Increment an existing line or insert a new one"""
        self._logger.info(
            "➕ ADD ITEM: User %s, Product %s, Qty %d",
            user_id.value,
            product_id.value,
            quantity,
        )

        try:
            try:
                return self._add_item_once(user_id, product_id, quantity)
            except IntegrityError:
                # A concurrent add created the line between our UPDATE and INSERT
                self._logger.warning(
                    "🔁 CART LINE CREATED CONCURRENTLY: User %s, Product %s - merging",
                    user_id.value,
                    product_id.value,
                )
                return self._add_item_once(user_id, product_id, quantity)

        except SQLAlchemyError as e:
            self._logger.error("💥 DATABASE ERROR adding item to cart: %s", e)
            raise

    def _add_item_once(self, user_id: UserId, product_id: ProductId, quantity: int) -> CartLine:
        with managed_session("add_cart_item") as session:
            result = session.execute(
                update(SQLCartItem)
                .where(
                    SQLCartItem.user_id == user_id.value,
                    SQLCartItem.product_id == product_id.value,
                )
                .values(quantity=SQLCartItem.quantity + quantity)
            )

            if result.rowcount == 0:
                session.add(
                    SQLCartItem(
                        user_id=user_id.value,
                        product_id=product_id.value,
                        quantity=quantity,
                    )
                )
                session.flush()
                self._logger.info("🆕 ITEM ADDED: Product %s, Quantity %d", product_id.value, quantity)
            else:
                self._logger.info("🔄 ITEM MERGED: Product %s, +%d", product_id.value, quantity)

            line = self._load_line(session, user_id, product_id)

        self._logger.info("✅ CART UPDATE SUCCESS: quantity now %d", line.quantity)
        return line

    async def update_item(
        self, user_id: UserId, product_id: ProductId, quantity: int
    ) -> Optional[CartLine]:
        """Overwrite the quantity of an existing line"""
        self._logger.info(
            "🔄 UPDATE ITEM: User %s, Product %s, Qty %d",
            user_id.value,
            product_id.value,
            quantity,
        )

        try:
            with managed_session() as session:
                result = session.execute(
                    update(SQLCartItem)
                    .where(
                        SQLCartItem.user_id == user_id.value,
                        SQLCartItem.product_id == product_id.value,
                    )
                    .values(quantity=quantity)
                )
                if result.rowcount == 0:
                    self._logger.info("📭 ITEM NOT FOUND in cart")
                    return None

                line = self._load_line(session, user_id, product_id)

            self._logger.info("✅ ITEM UPDATED")
            return line

        except SQLAlchemyError as e:
            self._logger.error("💥 DATABASE ERROR updating cart item: %s", e)
            raise

    async def remove_item(self, user_id: UserId, product_id: ProductId) -> bool:
        """Remove item from cart"""
        self._logger.info("➖ REMOVE FROM CART: User %s, Product %s", user_id.value, product_id.value)

        try:
            with managed_session() as session:
                result = session.execute(
                    delete(SQLCartItem).where(
                        SQLCartItem.user_id == user_id.value,
                        SQLCartItem.product_id == product_id.value,
                    )
                )
                removed = result.rowcount > 0

            self._logger.info("✅ ITEM REMOVED" if removed else "📭 ITEM NOT FOUND in cart")
            return removed

        except SQLAlchemyError as e:
            self._logger.error("💥 DATABASE ERROR removing from cart: %s", e)
            raise

    async def clear(self, user_id: UserId) -> int:
        """Clear all items from cart"""
        self._logger.info("🗑️ CLEAR CART: User %s", user_id.value)

        try:
            with managed_session() as session:
                result = session.execute(
                    delete(SQLCartItem).where(SQLCartItem.user_id == user_id.value)
                )
                removed = result.rowcount

            self._logger.info("✅ CART CLEARED: %d lines", removed)
            return removed

        except SQLAlchemyError as e:
            self._logger.error("💥 DATABASE ERROR clearing cart: %s", e)
            raise

    @staticmethod
    def _load_line(session, user_id: UserId, product_id: ProductId) -> CartLine:
        item, product = (
            session.query(SQLCartItem, SQLProduct)
            .join(SQLProduct, SQLCartItem.product_id == SQLProduct.id)
            .filter(
                SQLCartItem.user_id == user_id.value,
                SQLCartItem.product_id == product_id.value,
            )
            .one()
        )
        return to_cart_line(item, product)
