"""Domain services"""

from .pricing import OrderQuote, line_delivery_fee, price_cart, price_line

__all__ = ["OrderQuote", "line_delivery_fee", "price_cart", "price_line"]
