"""
Row to entity mapping shared by the SQLAlchemy repositories
"""

from metalbaza.domain.entities.cart_entity import CartLine
from metalbaza.domain.entities.order_entity import Order, OrderItem
from metalbaza.domain.entities.product_entity import Product
from metalbaza.domain.repositories.user_repository import UserInfo
from metalbaza.domain.value_objects.money import Money
from metalbaza.domain.value_objects.order_status import OrderStatus
from metalbaza.infrastructure.configuration.config import get_config
from metalbaza.infrastructure.database import models


def _currency() -> str:
    return get_config().currency


def to_product(row: models.Product) -> Product:
    currency = _currency()
    threshold = row.free_delivery_threshold
    return Product(
        id=row.id,
        name_uz=row.name_uz,
        name_ru=row.name_ru,
        price=Money.of(row.price, currency),
        delivery_price=Money.of(row.delivery_price, currency),
        free_delivery_threshold=None if threshold is None else Money.of(threshold, currency),
        unit=row.unit or "dona",
        image_url=row.image_url,
        is_available=bool(row.is_available),
        is_rental=bool(row.is_rental),
    )


def to_cart_line(row: models.CartItem, product: models.Product) -> CartLine:
    return CartLine(
        id=row.id,
        user_id=row.user_id,
        product=to_product(product),
        quantity=row.quantity,
        created_at=row.created_at,
    )


def to_order_item(row: models.OrderItem) -> OrderItem:
    currency = _currency()
    return OrderItem(
        id=row.id,
        order_id=row.order_id,
        product_id=row.product_id,
        product_name=row.product_name,
        quantity=row.quantity,
        price_per_unit=Money.of(row.price_per_unit, currency),
        total_price=Money.of(row.total_price, currency),
        delivery_fee=Money.of(row.delivery_fee, currency),
    )


def to_order(row: models.Order) -> Order:
    currency = _currency()
    return Order(
        id=row.id,
        user_id=row.user_id,
        total_amount=Money.of(row.total_amount, currency),
        delivery_amount=Money.of(row.delivery_amount, currency),
        is_delivery=bool(row.is_delivery),
        status=OrderStatus(row.status),
        delivery_address=row.delivery_address,
        delivery_latitude=row.delivery_latitude,
        delivery_longitude=row.delivery_longitude,
        notes=row.notes,
        created_at=row.created_at,
        updated_at=row.updated_at,
        items=[to_order_item(item) for item in row.order_items],
    )


def to_user(row: models.User) -> UserInfo:
    return UserInfo(
        id=row.id,
        telegram_id=row.telegram_id,
        first_name=row.first_name,
        last_name=row.last_name,
        phone=row.phone,
        role=row.role,
        language=row.language or "uz",
    )
