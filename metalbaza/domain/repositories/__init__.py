"""
Domain repository interfaces

Contains abstract repository interfaces that define contracts for data access.
These follow the Repository pattern and Dependency Inversion principle.
"""

from .cart_repository import CartRepository
from .company_settings_repository import CompanySettings, CompanySettingsRepository
from .order_repository import OrderRepository
from .product_repository import ProductRepository
from .user_repository import UserInfo, UserRepository

__all__ = [
    "CartRepository",
    "CompanySettings",
    "CompanySettingsRepository",
    "OrderRepository",
    "ProductRepository",
    "UserInfo",
    "UserRepository",
]
