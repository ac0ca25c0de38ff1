"""
Domain Layer Tests

Value objects, entities and the order status state machine.
"""

from decimal import Decimal

import pytest

from metalbaza.domain.entities.cart_entity import CartLine
from metalbaza.domain.entities.order_entity import Order, OrderDraft, OrderLineDraft
from metalbaza.domain.entities.product_entity import Product
from metalbaza.domain.value_objects.delivery_address import DeliveryAddress
from metalbaza.domain.value_objects.identifiers import OrderId, ProductId, UserId
from metalbaza.domain.value_objects.money import Money
from metalbaza.domain.value_objects.order_status import OrderStatus
from metalbaza.domain.value_objects.telegram_id import TelegramId


def make_product(**overrides) -> Product:
    fields = {
        "id": 1,
        "name_uz": "Armatura",
        "name_ru": "Арматура",
        "price": Money(Decimal("10000")),
        "delivery_price": Money(Decimal("5000")),
    }
    fields.update(overrides)
    return Product(**fields)


class TestMoney:
    """Test Money value object"""

    def test_rounds_to_two_decimals(self):
        """Amounts are stored with two fractional digits"""
        assert Money(Decimal("10.005")).amount == Decimal("10.01")
        assert Money(45000).amount == Decimal("45000.00")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValueError, match="negative"):
            Money(Decimal("-1"))

    def test_invalid_currency_rejected(self):
        with pytest.raises(ValueError, match="3-letter"):
            Money(Decimal("1"), "SOM1")

    def test_addition_and_multiplication(self):
        total = Money(Decimal("45000")) * 2 + Money(Decimal("120000"))
        assert total == Money(Decimal("210000"))

    def test_cannot_mix_currencies(self):
        with pytest.raises(ValueError, match="different currencies"):
            Money(Decimal("1"), "UZS") + Money(Decimal("1"), "USD")

    def test_of_treats_none_as_zero(self):
        assert Money.of(None).is_zero()
        assert Money.of("12.5").amount == Decimal("12.50")

    def test_comparison(self):
        assert Money(Decimal("50000")) >= Money(Decimal("50000"))
        assert Money(Decimal("40000")) < Money(Decimal("50000"))

    def test_format_display(self):
        assert Money(Decimal("1250000")).format_display() == "1 250 000 UZS"
        assert Money(Decimal("12.5")).format_display() == "12.50 UZS"


class TestIdentifiers:
    """Test identifier value objects"""

    @pytest.mark.parametrize("cls", [UserId, ProductId, OrderId, TelegramId])
    def test_positive_integer_required(self, cls):
        assert int(cls(5)) == 5
        for bad in (0, -1, "5", True):
            with pytest.raises(ValueError):
                cls(bad)


class TestDeliveryAddress:
    """Test DeliveryAddress value object"""

    def test_address_is_stripped(self):
        assert DeliveryAddress("  Tashkent, st. X  ").value == "Tashkent, st. X"

    def test_empty_address_rejected(self):
        with pytest.raises(ValueError, match="empty"):
            DeliveryAddress("   ")

    def test_too_long_address_rejected(self):
        with pytest.raises(ValueError, match="exceed"):
            DeliveryAddress("x" * 501)

    def test_is_blank(self):
        assert DeliveryAddress.is_blank(None)
        assert DeliveryAddress.is_blank(" \t")
        assert not DeliveryAddress.is_blank("Chilonzor 5")


class TestOrderStatus:
    """Test the order status state machine"""

    @pytest.mark.parametrize(
        "current,new",
        [
            (OrderStatus.PENDING, OrderStatus.CONFIRMED),
            (OrderStatus.CONFIRMED, OrderStatus.PROCESSING),
            (OrderStatus.PROCESSING, OrderStatus.COMPLETED),
            (OrderStatus.PENDING, OrderStatus.CANCELLED),
            (OrderStatus.CONFIRMED, OrderStatus.CANCELLED),
            (OrderStatus.PROCESSING, OrderStatus.CANCELLED),
        ],
    )
    def test_allowed_transitions(self, current, new):
        assert current.can_transition_to(new)

    @pytest.mark.parametrize(
        "current,new",
        [
            (OrderStatus.PENDING, OrderStatus.COMPLETED),
            (OrderStatus.PENDING, OrderStatus.PROCESSING),
            (OrderStatus.CONFIRMED, OrderStatus.PENDING),
            (OrderStatus.COMPLETED, OrderStatus.CANCELLED),
            (OrderStatus.CANCELLED, OrderStatus.PENDING),
            (OrderStatus.PENDING, OrderStatus.PENDING),
        ],
    )
    def test_forbidden_transitions(self, current, new):
        assert not current.can_transition_to(new)

    def test_terminal_states(self):
        assert OrderStatus.COMPLETED.is_terminal
        assert OrderStatus.CANCELLED.is_terminal
        assert not OrderStatus.PENDING.is_terminal

    def test_parse(self):
        assert OrderStatus.parse(" Confirmed ") is OrderStatus.CONFIRMED
        with pytest.raises(ValueError, match="Unknown order status"):
            OrderStatus.parse("shipped")


class TestEntities:
    """Test product, cart and order entities"""

    def test_display_name_falls_back_to_uzbek(self):
        product = make_product(name_ru=None)
        assert product.display_name("ru") == "Armatura"
        assert make_product().display_name("ru") == "Арматура"

    def test_cart_line_subtotal(self):
        line = CartLine(user_id=1, product=make_product(), quantity=3)
        assert line.product_id == 1
        assert line.subtotal == Money(Decimal("30000"))

    def test_draft_cart_snapshot(self):
        zero = Money.zero()
        draft = OrderDraft(
            user_id=1,
            lines=(
                OrderLineDraft(1, "A", 2, zero, zero, zero),
                OrderLineDraft(7, "B", 5, zero, zero, zero),
            ),
            total_amount=zero,
            delivery_amount=zero,
            is_delivery=False,
        )
        assert draft.cart_snapshot() == {1: 2, 7: 5}

    def test_order_grand_total(self):
        order = Order(
            id=1,
            user_id=1,
            total_amount=Money(Decimal("210000")),
            delivery_amount=Money(Decimal("5000")),
            is_delivery=True,
            status=OrderStatus.PENDING,
        )
        assert order.grand_total == Money(Decimal("215000"))
