"""
Data Transfer Objects

Request and response shapes passed between the HTTP adapter and the use cases.
"""

from .cart_dtos import AddToCartRequest, CartItemInfo, CartSummary, UpdateCartItemRequest
from .order_dtos import PlaceOrderRequest, UpdateOrderStatusRequest

__all__ = [
    "AddToCartRequest",
    "CartItemInfo",
    "CartSummary",
    "PlaceOrderRequest",
    "UpdateCartItemRequest",
    "UpdateOrderStatusRequest",
]
