"""
SQLAlchemy Product Repository

Read-only catalog lookups.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from metalbaza.domain.entities.product_entity import Product
from metalbaza.domain.repositories.product_repository import ProductRepository
from metalbaza.domain.value_objects.identifiers import ProductId
from metalbaza.infrastructure.database.models import Product as SQLProduct
from metalbaza.infrastructure.repositories.mappers import to_product
from metalbaza.infrastructure.repositories.session_handler import managed_session


class SQLAlchemyProductRepository(ProductRepository):
    """SQLAlchemy implementation of the product catalog"""

    def __init__(self):
        self._logger = logging.getLogger(self.__class__.__name__)

    async def get_product(self, product_id: ProductId) -> Optional[Product]:
        """Find product by ID"""
        self._logger.debug("🔍 GET PRODUCT: %s", product_id.value)
        try:
            with managed_session() as session:
                row = session.get(SQLProduct, product_id.value)
                if row is None:
                    self._logger.info("📭 PRODUCT NOT FOUND: %s", product_id.value)
                    return None
                return to_product(row)

        except SQLAlchemyError as e:
            self._logger.error("💥 DATABASE ERROR getting product: %s", e)
            raise
