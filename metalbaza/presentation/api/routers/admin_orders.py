"""Administrative order endpoints"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from metalbaza.application.dtos.order_dtos import UpdateOrderStatusRequest
from metalbaza.container import Container, get_container
from metalbaza.domain.repositories.user_repository import UserInfo
from metalbaza.infrastructure.utilities.constants import BusinessSettings
from metalbaza.presentation.api.dependencies import require_admin
from metalbaza.presentation.api.schemas import OrderOut, UpdateOrderStatusIn

router = APIRouter(prefix="/api/admin/orders", tags=["admin"])


@router.get("", response_model=List[OrderOut])
async def list_all_orders(
    status: Optional[str] = Query(None),
    limit: int = Query(BusinessSettings.DEFAULT_ORDER_LIST_LIMIT, ge=1),
    admin: UserInfo = Depends(require_admin),
    container: Container = Depends(get_container),
):
    orders = await container.get_order_query_use_case().list_all_orders(status=status, limit=limit)
    return [OrderOut.from_order(order) for order in orders]


@router.patch("/{order_id}/status", response_model=OrderOut)
async def update_order_status(
    order_id: int,
    payload: UpdateOrderStatusIn,
    admin: UserInfo = Depends(require_admin),
    container: Container = Depends(get_container),
):
    order = await container.get_order_status_use_case().update_order_status(
        UpdateOrderStatusRequest(order_id=order_id, status=payload.status, admin_user_id=admin.id)
    )
    return OrderOut.from_order(order)
