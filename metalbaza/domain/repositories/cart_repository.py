"""
Cart repository interface

Defines the contract for cart data access operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from metalbaza.domain.entities.cart_entity import CartLine
from metalbaza.domain.value_objects.identifiers import ProductId, UserId


class CartRepository(ABC):
    """Repository interface for cart operations"""

    @abstractmethod
    async def list_items(self, user_id: UserId) -> List[CartLine]:
        """Cart lines for a user joined with current product data, newest first"""

    @abstractmethod
    async def add_item(self, user_id: UserId, product_id: ProductId, quantity: int) -> CartLine:
        """Add quantity to an existing line or create the line"""

    @abstractmethod
    async def update_item(
        self, user_id: UserId, product_id: ProductId, quantity: int
    ) -> Optional[CartLine]:
        """Set the quantity of an existing line, None if there is no such line"""

    @abstractmethod
    async def remove_item(self, user_id: UserId, product_id: ProductId) -> bool:
        """Remove a line, returning whether one existed"""

    @abstractmethod
    async def clear(self, user_id: UserId) -> int:
        """Remove all lines for a user, returning how many were removed"""
