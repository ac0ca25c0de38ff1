"""Customer order endpoints: checkout and order history"""

from typing import List

from fastapi import APIRouter, Depends, status

from metalbaza.application.dtos.order_dtos import PlaceOrderRequest
from metalbaza.container import Container, get_container
from metalbaza.domain.repositories.user_repository import UserInfo
from metalbaza.presentation.api.dependencies import get_current_user
from metalbaza.presentation.api.schemas import OrderOut, PlaceOrderIn

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("", response_model=OrderOut, status_code=status.HTTP_201_CREATED)
async def place_order(
    payload: PlaceOrderIn,
    user: UserInfo = Depends(get_current_user),
    container: Container = Depends(get_container),
):
    order = await container.get_order_creation_use_case().place_order(
        PlaceOrderRequest(
            user_id=user.id,
            is_delivery=payload.is_delivery,
            delivery_address=payload.delivery_address,
            delivery_latitude=payload.delivery_latitude,
            delivery_longitude=payload.delivery_longitude,
            notes=payload.notes,
        )
    )
    return OrderOut.from_order(order)


@router.get("", response_model=List[OrderOut])
async def list_orders(
    user: UserInfo = Depends(get_current_user),
    container: Container = Depends(get_container),
):
    orders = await container.get_order_query_use_case().list_user_orders(user.id)
    return [OrderOut.from_order(order) for order in orders]


@router.get("/{order_id}", response_model=OrderOut)
async def get_order(
    order_id: int,
    user: UserInfo = Depends(get_current_user),
    container: Container = Depends(get_container),
):
    order = await container.get_order_query_use_case().get_user_order(user.id, order_id)
    return OrderOut.from_order(order)
