"""API routers"""

from . import admin_orders, cart, orders, system

__all__ = ["admin_orders", "cart", "orders", "system"]
