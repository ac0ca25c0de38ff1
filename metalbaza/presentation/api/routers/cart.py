"""Cart endpoints"""

from fastapi import APIRouter, Depends, Request

from metalbaza.application.dtos.cart_dtos import (
    AddToCartRequest,
    CartItemInfo,
    UpdateCartItemRequest,
)
from metalbaza.container import Container, get_container
from metalbaza.domain.repositories.user_repository import UserInfo
from metalbaza.presentation.api.dependencies import get_current_user, request_language
from metalbaza.presentation.api.schemas import (
    AddCartItemIn,
    CartItemOut,
    CartOut,
    UpdateCartItemIn,
)

router = APIRouter(prefix="/api/cart", tags=["cart"])


@router.get("", response_model=CartOut)
async def get_cart(
    request: Request,
    user: UserInfo = Depends(get_current_user),
    container: Container = Depends(get_container),
):
    summary = await container.get_cart_management_use_case().get_cart_summary(
        user.id, request_language(request)
    )
    return CartOut.from_summary(summary)


@router.post("", response_model=CartItemOut)
async def add_item(
    payload: AddCartItemIn,
    request: Request,
    user: UserInfo = Depends(get_current_user),
    container: Container = Depends(get_container),
):
    line = await container.get_cart_management_use_case().add_item(
        AddToCartRequest(user_id=user.id, product_id=payload.product_id, quantity=payload.quantity)
    )
    return CartItemOut.from_info(CartItemInfo.from_line(line, request_language(request)))


@router.put("/{product_id}", response_model=CartItemOut)
async def update_item(
    product_id: int,
    payload: UpdateCartItemIn,
    request: Request,
    user: UserInfo = Depends(get_current_user),
    container: Container = Depends(get_container),
):
    line = await container.get_cart_management_use_case().update_item(
        UpdateCartItemRequest(user_id=user.id, product_id=product_id, quantity=payload.quantity)
    )
    return CartItemOut.from_info(CartItemInfo.from_line(line, request_language(request)))


@router.delete("/{product_id}")
async def remove_item(
    product_id: int,
    user: UserInfo = Depends(get_current_user),
    container: Container = Depends(get_container),
):
    removed = await container.get_cart_management_use_case().remove_item(user.id, product_id)
    return {"success": True, "removed": removed}


@router.delete("")
async def clear_cart(
    user: UserInfo = Depends(get_current_user),
    container: Container = Depends(get_container),
):
    removed = await container.get_cart_management_use_case().clear_cart(user.id)
    return {"success": True, "removed": removed}
