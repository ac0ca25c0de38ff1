"""
Request and response schemas of the HTTP API

Field names travel in camelCase on the wire; money travels as decimal strings.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from metalbaza.application.dtos.cart_dtos import CartItemInfo, CartSummary
from metalbaza.domain.entities.order_entity import Order, OrderItem
from metalbaza.infrastructure.utilities.constants import BusinessSettings


class ApiModel(BaseModel):
    """Base schema: camelCase aliases, snake_case accepted too"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Requests


class AddCartItemIn(ApiModel):
    product_id: int
    quantity: int = 1


class UpdateCartItemIn(ApiModel):
    quantity: int


class PlaceOrderIn(ApiModel):
    is_delivery: bool = False
    delivery_address: Optional[str] = None
    delivery_latitude: Optional[float] = Field(None, ge=-90, le=90)
    delivery_longitude: Optional[float] = Field(None, ge=-180, le=180)
    notes: Optional[str] = Field(None, max_length=BusinessSettings.MAX_NOTES_LENGTH)


class UpdateOrderStatusIn(ApiModel):
    status: str


class UpdateCompanySettingsIn(ApiModel):
    is_delivery: bool


# Responses


class CartItemOut(ApiModel):
    product_id: int
    product_name: str
    quantity: int
    unit_price: Decimal
    total_price: Decimal
    unit: str
    delivery_price: Decimal
    free_delivery_threshold: Optional[Decimal] = None
    image_url: Optional[str] = None
    is_available: bool
    is_rental: bool

    @classmethod
    def from_info(cls, info: CartItemInfo) -> "CartItemOut":
        threshold = info.free_delivery_threshold
        return cls(
            product_id=info.product_id,
            product_name=info.product_name,
            quantity=info.quantity,
            unit_price=info.unit_price.amount,
            total_price=info.total_price.amount,
            unit=info.unit,
            delivery_price=info.delivery_price.amount,
            free_delivery_threshold=None if threshold is None else threshold.amount,
            image_url=info.image_url,
            is_available=info.is_available,
            is_rental=info.is_rental,
        )


class CartOut(ApiModel):
    items: List[CartItemOut]
    items_count: int
    subtotal: Decimal
    currency: str

    @classmethod
    def from_summary(cls, summary: CartSummary) -> "CartOut":
        return cls(
            items=[CartItemOut.from_info(item) for item in summary.items],
            items_count=summary.items_count,
            subtotal=summary.subtotal.amount,
            currency=summary.subtotal.currency,
        )


class OrderItemOut(ApiModel):
    id: int
    product_id: Optional[int] = None
    product_name: str
    quantity: int
    price_per_unit: Decimal
    total_price: Decimal
    delivery_fee: Decimal

    @classmethod
    def from_item(cls, item: OrderItem) -> "OrderItemOut":
        return cls(
            id=item.id,
            product_id=item.product_id,
            product_name=item.product_name,
            quantity=item.quantity,
            price_per_unit=item.price_per_unit.amount,
            total_price=item.total_price.amount,
            delivery_fee=item.delivery_fee.amount,
        )


class OrderOut(ApiModel):
    id: int
    user_id: int
    status: str
    is_delivery: bool
    delivery_address: Optional[str] = None
    delivery_latitude: Optional[float] = None
    delivery_longitude: Optional[float] = None
    notes: Optional[str] = None
    total_amount: Decimal
    delivery_amount: Decimal
    grand_total: Decimal
    currency: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    items: List[OrderItemOut]

    @classmethod
    def from_order(cls, order: Order) -> "OrderOut":
        return cls(
            id=order.id,
            user_id=order.user_id,
            status=order.status.value,
            is_delivery=order.is_delivery,
            delivery_address=order.delivery_address,
            delivery_latitude=order.delivery_latitude,
            delivery_longitude=order.delivery_longitude,
            notes=order.notes,
            total_amount=order.total_amount.amount,
            delivery_amount=order.delivery_amount.amount,
            grand_total=order.grand_total.amount,
            currency=order.total_amount.currency,
            created_at=order.created_at,
            updated_at=order.updated_at,
            items=[OrderItemOut.from_item(item) for item in order.items],
        )


class CompanySettingsOut(ApiModel):
    is_delivery: bool

