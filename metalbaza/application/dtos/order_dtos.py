"""
Order DTOs

Data Transfer Objects for order-related operations.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class PlaceOrderRequest:
    """Request to turn the user's cart into an order"""

    user_id: int
    is_delivery: bool = False
    delivery_address: Optional[str] = None
    delivery_latitude: Optional[float] = None
    delivery_longitude: Optional[float] = None
    notes: Optional[str] = None


@dataclass
class UpdateOrderStatusRequest:
    """Administrative status change"""

    order_id: int
    status: str
    admin_user_id: Optional[int] = None
