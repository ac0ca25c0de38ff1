"""
Application Use Cases Tests
"""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from metalbaza.application.dtos.cart_dtos import AddToCartRequest, UpdateCartItemRequest
from metalbaza.application.dtos.order_dtos import PlaceOrderRequest, UpdateOrderStatusRequest
from metalbaza.application.use_cases import (
    CartManagementUseCase,
    OrderCreationUseCase,
    OrderQueryUseCase,
    OrderStatusManagementUseCase,
)
from metalbaza.domain.entities.cart_entity import CartLine
from metalbaza.domain.entities.order_entity import Order
from metalbaza.domain.entities.product_entity import Product
from metalbaza.domain.repositories.company_settings_repository import CompanySettings
from metalbaza.domain.value_objects.identifiers import OrderId
from metalbaza.domain.value_objects.money import Money
from metalbaza.domain.value_objects.order_status import OrderStatus
from metalbaza.infrastructure.utilities.exceptions import (
    CartChangedError,
    CartItemNotFoundError,
    DeliveryUnavailableError,
    EmptyCartError,
    InvalidQuantityError,
    InvalidStatusTransitionError,
    MissingDeliveryAddressError,
    OrderCreationError,
    OrderNotFoundError,
    ProductNotFoundError,
    ProductUnavailableError,
    ValidationError,
)


def money(value) -> Money:
    return Money(Decimal(str(value)))


def product(product_id=1, price=10000, delivery_price=0, threshold=None, is_available=True):
    return Product(
        id=product_id,
        name_uz=f"Mahsulot {product_id}",
        price=money(price),
        delivery_price=money(delivery_price),
        free_delivery_threshold=None if threshold is None else money(threshold),
        is_available=is_available,
    )


def cart_line(prod: Product, quantity: int, user_id=1) -> CartLine:
    return CartLine(user_id=user_id, product=prod, quantity=quantity)


def order(order_id=10, user_id=1, status=OrderStatus.PENDING) -> Order:
    return Order(
        id=order_id,
        user_id=user_id,
        total_amount=money(90000),
        delivery_amount=money(0),
        is_delivery=False,
        status=status,
    )


class TestCartManagementUseCase:
    """Test cart management use case"""

    @pytest.fixture
    def cart_repository(self):
        return MagicMock()

    @pytest.fixture
    def product_repository(self):
        repository = MagicMock()
        repository.get_product = AsyncMock(return_value=product())
        return repository

    @pytest.fixture
    def use_case(self, cart_repository, product_repository):
        return CartManagementUseCase(cart_repository, product_repository, currency="UZS")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("quantity", [0, -3, 1.5, "2", True])
    async def test_add_rejects_invalid_quantity(self, use_case, cart_repository, quantity):
        """Invalid quantities fail before any repository access"""
        cart_repository.add_item = AsyncMock()

        with pytest.raises(InvalidQuantityError):
            await use_case.add_item(AddToCartRequest(user_id=1, product_id=1, quantity=quantity))

        cart_repository.add_item.assert_not_called()

    @pytest.mark.asyncio
    async def test_add_item_success(self, use_case, cart_repository):
        line = cart_line(product(), 3)
        cart_repository.add_item = AsyncMock(return_value=line)

        result = await use_case.add_item(AddToCartRequest(user_id=1, product_id=1, quantity=3))

        assert result is line
        args = cart_repository.add_item.call_args.args
        assert (args[0].value, args[1].value, args[2]) == (1, 1, 3)

    @pytest.mark.asyncio
    async def test_add_unknown_product(self, use_case, cart_repository, product_repository):
        product_repository.get_product = AsyncMock(return_value=None)
        cart_repository.add_item = AsyncMock()

        with pytest.raises(ProductNotFoundError):
            await use_case.add_item(AddToCartRequest(user_id=1, product_id=5))

        cart_repository.add_item.assert_not_called()

    @pytest.mark.asyncio
    async def test_add_unavailable_product(self, use_case, cart_repository, product_repository):
        product_repository.get_product = AsyncMock(return_value=product(is_available=False))
        cart_repository.add_item = AsyncMock()

        with pytest.raises(ProductUnavailableError):
            await use_case.add_item(AddToCartRequest(user_id=1, product_id=1))

        cart_repository.add_item.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_missing_line(self, use_case, cart_repository):
        cart_repository.update_item = AsyncMock(return_value=None)

        with pytest.raises(CartItemNotFoundError):
            await use_case.update_item(UpdateCartItemRequest(user_id=1, product_id=1, quantity=2))

    @pytest.mark.asyncio
    async def test_update_rejects_zero(self, use_case, cart_repository):
        cart_repository.update_item = AsyncMock()

        with pytest.raises(InvalidQuantityError):
            await use_case.update_item(UpdateCartItemRequest(user_id=1, product_id=1, quantity=0))

        cart_repository.update_item.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_product_id(self, use_case):
        with pytest.raises(ValidationError):
            await use_case.add_item(AddToCartRequest(user_id=1, product_id=0))

    @pytest.mark.asyncio
    async def test_cart_summary(self, use_case, cart_repository):
        cart_repository.list_items = AsyncMock(
            return_value=[cart_line(product(1, price=45000), 2), cart_line(product(2, price=120000), 1)]
        )

        summary = await use_case.get_cart_summary(1)

        assert summary.subtotal == money(210000)
        assert summary.items_count == 3
        assert [item.total_price for item in summary.items] == [money(90000), money(120000)]

    @pytest.mark.asyncio
    async def test_empty_cart_summary(self, use_case, cart_repository):
        cart_repository.list_items = AsyncMock(return_value=[])

        summary = await use_case.get_cart_summary(1)

        assert summary.is_empty
        assert summary.subtotal.is_zero()

    @pytest.mark.asyncio
    async def test_remove_and_clear(self, use_case, cart_repository):
        cart_repository.remove_item = AsyncMock(return_value=False)
        cart_repository.clear = AsyncMock(return_value=2)

        assert await use_case.remove_item(1, 1) is False
        assert await use_case.clear_cart(1) == 2


class TestOrderCreationUseCase:
    """Test order creation use case"""

    @pytest.fixture
    def cart_repository(self):
        repository = MagicMock()
        repository.list_items = AsyncMock(
            return_value=[
                cart_line(product(1, price=45000), 2),
                cart_line(product(2, price=120000, delivery_price=10000, threshold=100000), 1),
            ]
        )
        return repository

    @pytest.fixture
    def order_repository(self):
        repository = MagicMock()
        repository.create_order = AsyncMock(return_value=order())
        return repository

    @pytest.fixture
    def settings_repository(self):
        repository = MagicMock()
        repository.get_settings = AsyncMock(return_value=CompanySettings(is_delivery=True))
        return repository

    @pytest.fixture
    def notification_service(self):
        service = MagicMock()
        service.notify_new_order = AsyncMock(return_value=True)
        return service

    @pytest.fixture
    def use_case(self, cart_repository, order_repository, settings_repository, notification_service):
        user_repository = MagicMock()
        user_repository.find_by_id = AsyncMock(return_value=None)
        return OrderCreationUseCase(
            cart_repository,
            order_repository,
            settings_repository,
            user_repository,
            notification_service,
        )

    @pytest.mark.asyncio
    async def test_place_order_builds_priced_draft(self, use_case, order_repository):
        result = await use_case.place_order(
            PlaceOrderRequest(user_id=1, is_delivery=True, delivery_address="  Tashkent, st. X ")
        )

        assert result.id == 10
        draft = order_repository.create_order.call_args.args[0]
        assert draft.user_id == 1
        assert draft.total_amount == money(210000)
        assert draft.delivery_amount == money(0)
        assert draft.delivery_address == "Tashkent, st. X"
        assert draft.cart_snapshot() == {1: 2, 2: 1}

    @pytest.mark.asyncio
    async def test_pickup_ignores_address_and_coordinates(self, use_case, order_repository, settings_repository):
        await use_case.place_order(
            PlaceOrderRequest(
                user_id=1,
                is_delivery=False,
                delivery_address="Somewhere",
                delivery_latitude=41.3,
                delivery_longitude=69.2,
                notes="   ",
            )
        )

        draft = order_repository.create_order.call_args.args[0]
        assert draft.delivery_address is None
        assert draft.delivery_latitude is None
        assert draft.notes is None
        assert draft.delivery_amount.is_zero()
        settings_repository.get_settings.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_cart(self, use_case, cart_repository, order_repository):
        """Empty cart never reaches the order store"""
        cart_repository.list_items = AsyncMock(return_value=[])

        with pytest.raises(EmptyCartError):
            await use_case.place_order(PlaceOrderRequest(user_id=1))

        order_repository.create_order.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("address", [None, "", "   "])
    async def test_delivery_requires_address(self, use_case, order_repository, address):
        with pytest.raises(MissingDeliveryAddressError):
            await use_case.place_order(
                PlaceOrderRequest(user_id=1, is_delivery=True, delivery_address=address)
            )

        order_repository.create_order.assert_not_called()

    @pytest.mark.asyncio
    async def test_delivery_disabled_by_company(self, use_case, order_repository, settings_repository):
        settings_repository.get_settings = AsyncMock(return_value=CompanySettings(is_delivery=False))

        with pytest.raises(DeliveryUnavailableError):
            await use_case.place_order(
                PlaceOrderRequest(user_id=1, is_delivery=True, delivery_address="Chilonzor")
            )

        order_repository.create_order.assert_not_called()

    @pytest.mark.asyncio
    async def test_unavailable_product(self, use_case, cart_repository, order_repository):
        cart_repository.list_items = AsyncMock(
            return_value=[cart_line(product(1), 1), cart_line(product(2, is_available=False), 1)]
        )

        with pytest.raises(ProductUnavailableError):
            await use_case.place_order(PlaceOrderRequest(user_id=1))

        order_repository.create_order.assert_not_called()

    @pytest.mark.asyncio
    async def test_too_long_notes(self, use_case, order_repository):
        with pytest.raises(ValidationError):
            await use_case.place_order(PlaceOrderRequest(user_id=1, notes="x" * 1001))

        order_repository.create_order.assert_not_called()

    @pytest.mark.asyncio
    async def test_store_failure_becomes_order_creation_error(self, use_case, order_repository, notification_service):
        order_repository.create_order = AsyncMock(
            side_effect=OperationalError("INSERT INTO orders", {}, Exception("disk I/O error"))
        )

        with pytest.raises(OrderCreationError) as exc_info:
            await use_case.place_order(PlaceOrderRequest(user_id=1))

        assert exc_info.value.http_status == 500
        assert exc_info.value.user_message_key == "ERROR_ORDER_CREATION"
        notification_service.notify_new_order.assert_not_called()

    @pytest.mark.asyncio
    async def test_cart_changed_propagates(self, use_case, order_repository):
        order_repository.create_order = AsyncMock(side_effect=CartChangedError(1))

        with pytest.raises(CartChangedError):
            await use_case.place_order(PlaceOrderRequest(user_id=1))

    @pytest.mark.asyncio
    async def test_admin_notified_after_commit(self, use_case, notification_service):
        created = await use_case.place_order(PlaceOrderRequest(user_id=1))

        notification_service.notify_new_order.assert_awaited_once_with(created, None)

    @pytest.mark.asyncio
    async def test_notification_failure_does_not_fail_order(self, use_case, notification_service):
        notification_service.notify_new_order = AsyncMock(side_effect=RuntimeError("event loop closed"))

        created = await use_case.place_order(PlaceOrderRequest(user_id=1))

        assert created.id == 10

    @pytest.mark.asyncio
    async def test_works_without_notification_service(
        self, cart_repository, order_repository, settings_repository
    ):
        use_case = OrderCreationUseCase(cart_repository, order_repository, settings_repository)

        created = await use_case.place_order(PlaceOrderRequest(user_id=1))

        assert created.status is OrderStatus.PENDING


class TestOrderStatusManagementUseCase:
    """Test order status transitions"""

    @pytest.fixture
    def order_repository(self):
        repository = MagicMock()
        repository.get_order = AsyncMock(return_value=order(status=OrderStatus.PENDING))
        repository.update_status = AsyncMock(return_value=order(status=OrderStatus.CONFIRMED))
        return repository

    @pytest.mark.asyncio
    async def test_allowed_transition(self, order_repository):
        use_case = OrderStatusManagementUseCase(order_repository)

        result = await use_case.update_order_status(
            UpdateOrderStatusRequest(order_id=10, status="confirmed", admin_user_id=99)
        )

        assert result.status is OrderStatus.CONFIRMED
        order_repository.update_status.assert_awaited_once_with(
            OrderId(10), OrderStatus.CONFIRMED, expected_status=OrderStatus.PENDING
        )

    @pytest.mark.asyncio
    async def test_forbidden_transition(self, order_repository):
        use_case = OrderStatusManagementUseCase(order_repository)

        with pytest.raises(InvalidStatusTransitionError):
            await use_case.update_order_status(UpdateOrderStatusRequest(order_id=10, status="completed"))

        order_repository.update_status.assert_not_called()

    @pytest.mark.asyncio
    async def test_terminal_order_cannot_change(self, order_repository):
        order_repository.get_order = AsyncMock(return_value=order(status=OrderStatus.CANCELLED))
        use_case = OrderStatusManagementUseCase(order_repository)

        with pytest.raises(InvalidStatusTransitionError):
            await use_case.update_order_status(UpdateOrderStatusRequest(order_id=10, status="pending"))

    @pytest.mark.asyncio
    async def test_unknown_status(self, order_repository):
        use_case = OrderStatusManagementUseCase(order_repository)

        with pytest.raises(ValidationError):
            await use_case.update_order_status(UpdateOrderStatusRequest(order_id=10, status="shipped"))

        order_repository.get_order.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_order(self, order_repository):
        order_repository.get_order = AsyncMock(return_value=None)
        use_case = OrderStatusManagementUseCase(order_repository)

        with pytest.raises(OrderNotFoundError):
            await use_case.update_order_status(UpdateOrderStatusRequest(order_id=10, status="confirmed"))


class TestOrderQueryUseCase:
    """Test order history and admin listing"""

    @pytest.mark.asyncio
    async def test_other_users_order_is_not_found(self):
        repository = MagicMock()
        repository.get_order = AsyncMock(return_value=order(user_id=2))
        use_case = OrderQueryUseCase(repository)

        with pytest.raises(OrderNotFoundError):
            await use_case.get_user_order(user_id=1, order_id=10)

    @pytest.mark.asyncio
    async def test_own_order(self):
        repository = MagicMock()
        repository.get_order = AsyncMock(return_value=order(user_id=1))
        use_case = OrderQueryUseCase(repository)

        assert (await use_case.get_user_order(user_id=1, order_id=10)).id == 10

    @pytest.mark.asyncio
    async def test_admin_listing_parses_status_and_clamps_limit(self):
        repository = MagicMock()
        repository.list_orders = AsyncMock(return_value=[])
        use_case = OrderQueryUseCase(repository)

        await use_case.list_all_orders(status="Processing", limit=10_000)

        repository.list_orders.assert_awaited_once_with(limit=500, status=OrderStatus.PROCESSING)

    @pytest.mark.asyncio
    async def test_admin_listing_rejects_unknown_status(self):
        repository = MagicMock()
        repository.list_orders = AsyncMock()
        use_case = OrderQueryUseCase(repository)

        with pytest.raises(ValidationError):
            await use_case.list_all_orders(status="lost")

        repository.list_orders.assert_not_called()
