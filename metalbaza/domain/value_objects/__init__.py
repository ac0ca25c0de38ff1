"""
Domain value objects package

Contains immutable value objects that represent concepts in the business domain.
"""

from .delivery_address import DeliveryAddress
from .identifiers import OrderId, ProductId, UserId
from .money import Money
from .order_status import OrderStatus
from .telegram_id import TelegramId

__all__ = [
    "DeliveryAddress",
    "Money",
    "OrderId",
    "OrderStatus",
    "ProductId",
    "TelegramId",
    "UserId",
]
