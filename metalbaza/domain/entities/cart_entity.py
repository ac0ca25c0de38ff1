"""
Cart line entity
"""

from dataclasses import dataclass
from datetime import datetime

from metalbaza.domain.entities.product_entity import Product
from metalbaza.domain.value_objects.money import Money


@dataclass(frozen=True)
class CartLine:
    """One product a user intends to order, joined with live product data"""

    user_id: int
    product: Product
    quantity: int
    id: int | None = None
    created_at: datetime | None = None

    @property
    def product_id(self) -> int:
        return self.product.id

    @property
    def subtotal(self) -> Money:
        """Current price times quantity"""
        return self.product.price * self.quantity
