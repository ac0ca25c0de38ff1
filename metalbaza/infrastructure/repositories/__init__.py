"""
SQLAlchemy repository implementations

Concrete implementations of the domain repository interfaces.
"""

from .sqlalchemy_cart_repository import SQLAlchemyCartRepository
from .sqlalchemy_company_settings_repository import SQLAlchemyCompanySettingsRepository
from .sqlalchemy_order_repository import SQLAlchemyOrderRepository
from .sqlalchemy_product_repository import SQLAlchemyProductRepository
from .sqlalchemy_user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyCartRepository",
    "SQLAlchemyCompanySettingsRepository",
    "SQLAlchemyOrderRepository",
    "SQLAlchemyProductRepository",
    "SQLAlchemyUserRepository",
]
