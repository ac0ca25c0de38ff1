"""
Cart DTOs

Data Transfer Objects for cart-related operations.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from metalbaza.domain.entities.cart_entity import CartLine
from metalbaza.domain.value_objects.money import Money


@dataclass
class AddToCartRequest:
    """Request to add item to cart"""
    user_id: int
    product_id: int
    quantity: int = 1


@dataclass
class UpdateCartItemRequest:
    """Request to set the quantity of a cart line"""
    user_id: int
    product_id: int
    quantity: int


@dataclass
class CartItemInfo:
    """Cart line with live product data"""
    product_id: int
    product_name: str
    quantity: int
    unit_price: Money
    total_price: Money
    unit: str
    delivery_price: Money
    free_delivery_threshold: Optional[Money] = None
    image_url: Optional[str] = None
    is_available: bool = True
    is_rental: bool = False

    @classmethod
    def from_line(cls, line: CartLine, lang: str = "uz") -> "CartItemInfo":
        product = line.product
        return cls(
            product_id=product.id,
            product_name=product.display_name(lang),
            quantity=line.quantity,
            unit_price=product.price,
            total_price=line.subtotal,
            unit=product.unit,
            delivery_price=product.delivery_price,
            free_delivery_threshold=product.free_delivery_threshold,
            image_url=product.image_url,
            is_available=product.is_available,
            is_rental=product.is_rental,
        )


@dataclass
class CartSummary:
    """Cart contents priced with current catalog prices, delivery excluded"""
    items: List[CartItemInfo] = field(default_factory=list)
    subtotal: Money = field(default_factory=Money.zero)

    @property
    def items_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items
