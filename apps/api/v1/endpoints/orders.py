"""Order endpoints for REST API."""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query

from core.application.dtos.order_dto import (
    CreateOrderRequest,
    MessageDTO,
    OrderDTO,
    OrderPageDTO,
    UpdateOrderStatusRequest,
)
from core.application.pagination import Page
from core.application.policies import RequestedProduct
from core.application.services.order_service import OrderApplicationService
from core.domain.entities import Order
from core.domain.enums import UserRole
from core.domain.value_objects import Actor

from apps.api.deps import get_order_service
from apps.api.security import get_actor, get_org_id, require_roles

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])

STAFF_MANAGERS = (UserRole.OWNER, UserRole.ADMIN)


def _page_dto(page: Page[Order]) -> OrderPageDTO:
    return OrderPageDTO(
        orders=[OrderDTO.from_domain(order) for order in page.items],
        has_next=page.has_next,
    )


@router.post("", response_model=OrderDTO, status_code=201)
async def create_order(
    request: CreateOrderRequest,
    org_id: str = Depends(get_org_id),
    actor: Actor = Depends(get_actor),
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Place an order.

    Staff may place an order on behalf of a customer via ``user_id``;
    a CLIENT always orders for themselves.

    Returns:
        OrderDTO with the snapshotted lines
    """
    user_id = actor.user_id
    if request.user_id and not actor.is_client:
        user_id = request.user_id

    order = await service.create_order(
        organization_id=org_id,
        user_id=user_id,
        table=request.table,
        products=[RequestedProduct(p.product_id, p.quantity) for p in request.products],
    )
    return OrderDTO.from_domain(order)


@router.patch("/cancel/{order_id}", response_model=MessageDTO)
async def cancel_order(
    order_id: str,
    org_id: str = Depends(get_org_id),
    actor: Actor = Depends(get_actor),
    service: OrderApplicationService = Depends(get_order_service),
) -> MessageDTO:
    """Soft-cancel an order."""
    await service.cancel_order(order_id, org_id, actor=actor)
    return MessageDTO(message="Order canceled")


@router.delete("/delete/{order_id}", response_model=MessageDTO)
async def delete_order(
    order_id: str,
    org_id: str = Depends(get_org_id),
    actor: Actor = Depends(require_roles(*STAFF_MANAGERS)),
    service: OrderApplicationService = Depends(get_order_service),
) -> MessageDTO:
    """Hard-delete an order."""
    await service.delete_order(order_id, org_id)
    return MessageDTO(message="Order deleted")


@router.get("/get-all/today", response_model=List[OrderDTO])
async def list_today_orders(
    canceled_orders: bool = Query(default=False, description="Include canceled orders"),
    org_id: str = Depends(get_org_id),
    actor: Actor = Depends(get_actor),
    service: OrderApplicationService = Depends(get_order_service),
) -> List[OrderDTO]:
    """Orders of the tenant created since local midnight (kitchen view)."""
    orders = await service.list_today_orders(actor, org_id, include_canceled=canceled_orders)
    return [OrderDTO.from_domain(order) for order in orders]


@router.get("/get-all/page/{page}", response_model=OrderPageDTO)
async def list_organization_orders(
    page: int,
    org_id: str = Depends(get_org_id),
    actor: Actor = Depends(require_roles(*STAFF_MANAGERS)),
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderPageDTO:
    """Paginated order history of the tenant."""
    return _page_dto(await service.list_organization_orders(org_id, page))


@router.get("/me/{page}", response_model=OrderPageDTO)
async def list_my_orders(
    page: int,
    actor: Actor = Depends(get_actor),
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderPageDTO:
    """Paginated order history of the caller."""
    return _page_dto(await service.list_user_orders(actor.user_id, page))


@router.get("/user/{user_id}/{page}", response_model=OrderPageDTO)
async def list_user_orders(
    user_id: str,
    page: int,
    actor: Actor = Depends(require_roles(*STAFF_MANAGERS)),
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderPageDTO:
    """Paginated order history of any user."""
    return _page_dto(await service.list_user_orders(user_id, page))


@router.post("/restart-day", response_model=MessageDTO)
async def restart_day(
    org_id: str = Depends(get_org_id),
    actor: Actor = Depends(require_roles(*STAFF_MANAGERS)),
    service: OrderApplicationService = Depends(get_order_service),
) -> MessageDTO:
    """Cancel every active order of today."""
    canceled = await service.restart_day(org_id)
    return MessageDTO(message=f"Day restarted, {canceled} order(s) canceled")


@router.get("/{order_id}", response_model=OrderDTO)
async def get_order(
    order_id: str,
    org_id: str = Depends(get_org_id),
    actor: Actor = Depends(get_actor),
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Get order by ID."""
    return OrderDTO.from_domain(await service.get_order(order_id, org_id, actor=actor))


@router.patch("/{order_id}", response_model=OrderDTO)
async def update_order_status(
    order_id: str,
    request: UpdateOrderStatusRequest,
    org_id: str = Depends(get_org_id),
    actor: Actor = Depends(require_roles(UserRole.OWNER, UserRole.ADMIN, UserRole.WAITER)),
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Move an order to another progress state."""
    order = await service.update_order_status(order_id, org_id, request.status)
    return OrderDTO.from_domain(order)
