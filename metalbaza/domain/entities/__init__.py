"""
Domain entities package

Contains the core business entities of the MetalBaza cart and checkout.
"""

from .cart_entity import CartLine
from .order_entity import Order, OrderDraft, OrderItem, OrderLineDraft
from .product_entity import Product

__all__ = ["CartLine", "Order", "OrderDraft", "OrderItem", "OrderLineDraft", "Product"]
