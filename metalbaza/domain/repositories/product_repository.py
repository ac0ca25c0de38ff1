"""
Product repository interface

Read-only access to the product catalog.
"""

from abc import ABC, abstractmethod
from typing import Optional

from metalbaza.domain.entities.product_entity import Product
from metalbaza.domain.value_objects.identifiers import ProductId


class ProductRepository(ABC):
    """Repository interface for catalog lookups"""

    @abstractmethod
    async def get_product(self, product_id: ProductId) -> Optional[Product]:
        """Find product by ID"""
