# pylint: disable=too-many-instance-attributes
"""
Order entities

``OrderDraft`` is what checkout hands to persistence; ``Order`` and
``OrderItem`` are what persistence hands back.
"""

from dataclasses import dataclass, field
from datetime import datetime

from metalbaza.domain.value_objects.money import Money
from metalbaza.domain.value_objects.order_status import OrderStatus


@dataclass(frozen=True)
class OrderLineDraft:
    """A priced cart line, frozen at materialization time"""

    product_id: int
    product_name: str
    quantity: int
    price_per_unit: Money
    total_price: Money
    delivery_fee: Money


@dataclass(frozen=True)
class OrderDraft:
    """Everything needed to persist one order in a single transaction"""

    user_id: int
    lines: tuple[OrderLineDraft, ...]
    total_amount: Money
    delivery_amount: Money
    is_delivery: bool
    delivery_address: str | None = None
    delivery_latitude: float | None = None
    delivery_longitude: float | None = None
    notes: str | None = None

    def cart_snapshot(self) -> dict[int, int]:
        """Product id to quantity, as priced"""
        return {line.product_id: line.quantity for line in self.lines}


@dataclass
class OrderItem:
    """One immutable line of a materialized order"""

    id: int
    order_id: int
    product_id: int | None
    product_name: str
    quantity: int
    price_per_unit: Money
    total_price: Money
    delivery_fee: Money


@dataclass
class Order:
    """Materialized checkout result"""

    id: int
    user_id: int
    total_amount: Money
    delivery_amount: Money
    is_delivery: bool
    status: OrderStatus
    delivery_address: str | None = None
    delivery_latitude: float | None = None
    delivery_longitude: float | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    items: list[OrderItem] = field(default_factory=list)

    @property
    def grand_total(self) -> Money:
        """Goods plus delivery"""
        return self.total_amount + self.delivery_amount
