"""
Application Use Cases

Contains the application-specific business logic.
"""

from .cart_management_use_case import CartManagementUseCase
from .order_creation_use_case import OrderCreationUseCase
from .order_query_use_case import OrderQueryUseCase
from .order_status_management_use_case import OrderStatusManagementUseCase

__all__ = [
    "CartManagementUseCase",
    "OrderCreationUseCase",
    "OrderQueryUseCase",
    "OrderStatusManagementUseCase",
]
