"""
Order Creation Use Case

Handles the business logic for creating orders from cart items.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from metalbaza.application.dtos.order_dtos import PlaceOrderRequest
from metalbaza.application.use_cases.cart_management_use_case import to_user_id
from metalbaza.domain.entities.cart_entity import CartLine
from metalbaza.domain.entities.order_entity import Order, OrderDraft
from metalbaza.domain.repositories.cart_repository import CartRepository
from metalbaza.domain.repositories.company_settings_repository import CompanySettingsRepository
from metalbaza.domain.repositories.order_repository import OrderRepository
from metalbaza.domain.repositories.user_repository import UserRepository
from metalbaza.domain.services.pricing import price_cart
from metalbaza.domain.value_objects.delivery_address import DeliveryAddress
from metalbaza.infrastructure.services.admin_notification_service import AdminNotificationService
from metalbaza.infrastructure.utilities.constants import BusinessSettings
from metalbaza.infrastructure.utilities.exceptions import (
    DatabaseError,
    DeliveryUnavailableError,
    EmptyCartError,
    MissingDeliveryAddressError,
    OrderCreationError,
    ProductUnavailableError,
    ValidationError,
)


class OrderCreationUseCase:
    """Use case for creating orders from cart items"""

    def __init__(
        self,
        cart_repository: CartRepository,
        order_repository: OrderRepository,
        company_settings_repository: CompanySettingsRepository,
        user_repository: UserRepository | None = None,
        admin_notification_service: AdminNotificationService | None = None,
        *,
        currency: str = "UZS",
        language: str = "uz",
    ):
        self._cart_repository = cart_repository
        self._order_repository = order_repository
        self._company_settings_repository = company_settings_repository
        self._user_repository = user_repository
        self._admin_notification_service = admin_notification_service
        self._currency = currency
        self._language = language
        self._logger = logging.getLogger(self.__class__.__name__)

        self._logger.info("🏗️ ORDER USE CASE INITIALIZED")
        if self._admin_notification_service:
            self._logger.info(
                "  📨 Admin Notification Service: %s",
                type(self._admin_notification_service).__name__,
            )
        else:
            self._logger.warning("  ⚠️ Admin Notification Service: NOT AVAILABLE")

    async def place_order(self, request: PlaceOrderRequest) -> Order:
        """Materialize the user's cart into a pending order.

        Every validation runs before the first write. The order, its items and
        the cart clear are committed together by the order repository.
        """
        self._logger.info("📝 ===== ORDER CREATION STARTED =====")
        self._logger.info(
            "📝 ORDER CREATION: User %s, delivery=%s", request.user_id, request.is_delivery
        )

        user_id = to_user_id(request.user_id)

        try:
            lines = await self._cart_repository.list_items(user_id)
        except SQLAlchemyError as e:
            self._logger.error("💥 CART READ FAILED: %s", e, exc_info=True)
            raise DatabaseError(f"Failed to load cart: {e}", "list_items") from e

        if not lines:
            self._logger.warning("❌ EMPTY CART: User %s", user_id.value)
            raise EmptyCartError()

        delivery_address = await self._validate_delivery(request)
        self._ensure_products_available(lines)
        notes = self._clean_notes(request.notes)

        quote = price_cart(lines, request.is_delivery, self._currency, self._language)
        self._logger.info(
            "💰 ORDER PRICED: %d lines, total=%s, delivery=%s",
            len(quote.lines),
            quote.total_amount,
            quote.delivery_amount,
        )

        draft = OrderDraft(
            user_id=user_id.value,
            lines=quote.lines,
            total_amount=quote.total_amount,
            delivery_amount=quote.delivery_amount,
            is_delivery=request.is_delivery,
            delivery_address=delivery_address,
            delivery_latitude=request.delivery_latitude if request.is_delivery else None,
            delivery_longitude=request.delivery_longitude if request.is_delivery else None,
            notes=notes,
        )

        try:
            order = await self._order_repository.create_order(draft)
        except SQLAlchemyError as e:
            self._logger.error("💥 ORDER PERSISTENCE FAILED: %s", e, exc_info=True)
            raise OrderCreationError(type(e).__name__) from e

        self._logger.info("✅ ORDER CREATED: #%s", order.id)

        await self._send_admin_notification(order)

        self._logger.info("🎉 ===== ORDER CREATION COMPLETED =====")
        return order

    async def _validate_delivery(self, request: PlaceOrderRequest) -> str | None:
        """Address for delivery orders, None for pickup"""
        if not request.is_delivery:
            return None

        if DeliveryAddress.is_blank(request.delivery_address):
            raise MissingDeliveryAddressError()

        try:
            address = DeliveryAddress(request.delivery_address)
        except ValueError as e:
            raise ValidationError(str(e), field="delivery_address") from e

        settings = await self._company_settings_repository.get_settings()
        if not settings.is_delivery:
            self._logger.warning("🚫 DELIVERY DISABLED: rejecting delivery order")
            raise DeliveryUnavailableError()

        return address.value

    def _ensure_products_available(self, lines: list[CartLine]) -> None:
        for line in lines:
            if not line.product.is_available:
                self._logger.warning("❌ PRODUCT UNAVAILABLE at checkout: %s", line.product_id)
                raise ProductUnavailableError(line.product_id)

    @staticmethod
    def _clean_notes(notes: str | None) -> str | None:
        if notes is None or not notes.strip():
            return None
        notes = notes.strip()
        if len(notes) > BusinessSettings.MAX_NOTES_LENGTH:
            raise ValidationError(
                f"Notes cannot exceed {BusinessSettings.MAX_NOTES_LENGTH} characters",
                field="notes",
            )
        return notes

    async def _send_admin_notification(self, order: Order) -> None:
        if not self._admin_notification_service:
            return

        try:
            customer = None
            if self._user_repository:
                customer = await self._user_repository.find_by_id(order.user_id)
            await self._admin_notification_service.notify_new_order(order, customer)
        except (RuntimeError, SQLAlchemyError) as e:
            self._logger.error("💥 ADMIN NOTIFICATION FAILED: %s", e, exc_info=True)
