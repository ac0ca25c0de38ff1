"""
Cart Management Use Case

Handles the business logic for cart operations.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from metalbaza.application.dtos.cart_dtos import (
    AddToCartRequest,
    CartItemInfo,
    CartSummary,
    UpdateCartItemRequest,
)
from metalbaza.domain.entities.cart_entity import CartLine
from metalbaza.domain.repositories.cart_repository import CartRepository
from metalbaza.domain.repositories.product_repository import ProductRepository
from metalbaza.domain.value_objects.identifiers import ProductId, UserId
from metalbaza.domain.value_objects.money import Money
from metalbaza.infrastructure.utilities.exceptions import (
    CartItemNotFoundError,
    DatabaseError,
    InvalidQuantityError,
    ProductNotFoundError,
    ProductUnavailableError,
    ValidationError,
)


def validate_quantity(quantity) -> int:
    """Quantity must be an integer of at least one"""
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise InvalidQuantityError(quantity)
    return quantity


def to_user_id(value: int) -> UserId:
    try:
        return UserId(value)
    except ValueError as e:
        raise ValidationError(str(e), field="user_id") from e


def to_product_id(value: int) -> ProductId:
    try:
        return ProductId(value)
    except ValueError as e:
        raise ValidationError(str(e), field="product_id") from e


class CartManagementUseCase:
    """Use case for cart management operations"""

    def __init__(
        self,
        cart_repository: CartRepository,
        product_repository: ProductRepository,
        currency: str = "UZS",
    ):
        self._cart_repository = cart_repository
        self._product_repository = product_repository
        self._currency = currency
        self._logger = logging.getLogger(self.__class__.__name__)

    async def add_item(self, request: AddToCartRequest) -> CartLine:
        """Add item to cart, merging with an existing line for the same product"""
        self._logger.info(
            "🛒 ADD TO CART: User %s, Product %s, Qty %s",
            request.user_id,
            request.product_id,
            request.quantity,
        )

        quantity = validate_quantity(request.quantity)
        user_id = to_user_id(request.user_id)
        product_id = to_product_id(request.product_id)

        product = await self._product_repository.get_product(product_id)
        if product is None:
            self._logger.warning("❌ PRODUCT NOT FOUND: %s", product_id.value)
            raise ProductNotFoundError(product_id.value)
        if not product.is_available:
            self._logger.warning("❌ PRODUCT UNAVAILABLE: %s", product_id.value)
            raise ProductUnavailableError(product_id.value)

        try:
            line = await self._cart_repository.add_item(user_id, product_id, quantity)
        except SQLAlchemyError as e:
            self._logger.error("💥 ADD TO CART FAILED: %s", e, exc_info=True)
            raise DatabaseError(f"Failed to add item to cart: {e}", "add_item") from e

        self._logger.info("✅ ADDED TO CART: Product %s, quantity now %d", product_id.value, line.quantity)
        return line

    async def update_item(self, request: UpdateCartItemRequest) -> CartLine:
        """Set the quantity of an existing cart line"""
        self._logger.info(
            "🔄 UPDATE CART ITEM: User %s, Product %s, Qty %s",
            request.user_id,
            request.product_id,
            request.quantity,
        )

        quantity = validate_quantity(request.quantity)
        user_id = to_user_id(request.user_id)
        product_id = to_product_id(request.product_id)

        try:
            line = await self._cart_repository.update_item(user_id, product_id, quantity)
        except SQLAlchemyError as e:
            self._logger.error("💥 UPDATE CART ITEM FAILED: %s", e, exc_info=True)
            raise DatabaseError(f"Failed to update cart item: {e}", "update_item") from e

        if line is None:
            raise CartItemNotFoundError(user_id.value, product_id.value)
        return line

    async def remove_item(self, user_id: int, product_id: int) -> bool:
        """Remove a line; removing a missing line is not an error"""
        try:
            removed = await self._cart_repository.remove_item(
                to_user_id(user_id), to_product_id(product_id)
            )
        except SQLAlchemyError as e:
            self._logger.error("💥 REMOVE FROM CART FAILED: %s", e, exc_info=True)
            raise DatabaseError(f"Failed to remove cart item: {e}", "remove_item") from e

        self._logger.info("➖ REMOVE: User %s, Product %s, removed=%s", user_id, product_id, removed)
        return removed

    async def clear_cart(self, user_id: int) -> int:
        """Remove every line of the user's cart"""
        try:
            removed = await self._cart_repository.clear(to_user_id(user_id))
        except SQLAlchemyError as e:
            self._logger.error("💥 CLEAR CART FAILED: %s", e, exc_info=True)
            raise DatabaseError(f"Failed to clear cart: {e}", "clear") from e

        self._logger.info("🗑️ CART CLEARED: User %s, %d lines", user_id, removed)
        return removed

    async def get_cart_summary(self, user_id: int, lang: str = "uz") -> CartSummary:
        """Cart lines with current prices and the cart subtotal"""
        try:
            lines = await self._cart_repository.list_items(to_user_id(user_id))
        except SQLAlchemyError as e:
            self._logger.error("💥 GET CART FAILED: %s", e, exc_info=True)
            raise DatabaseError(f"Failed to load cart: {e}", "list_items") from e

        items = [CartItemInfo.from_line(line, lang) for line in lines]
        subtotal = Money.zero(self._currency)
        for item in items:
            subtotal = subtotal + item.total_price

        return CartSummary(items=items, subtotal=subtotal)
