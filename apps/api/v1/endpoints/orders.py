"""Order endpoints for REST API."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from core.application.dtos.order_dto import (
    CreateOrderRequest,
    OrderDTO,
    OrderStatusDTO,
    UpdateOrderStatusRequest,
)
from core.application.services.order_service import OrderApplicationService
from core.domain.enums import OrderStatus
from core.domain.value_objects import ShortID

from apps.api.deps import get_order_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])


def _require_short_id(order_id: str) -> str:
    # Malformed ids can never match a stored order
    if not ShortID.is_valid(order_id):
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")
    return order_id


@router.post("", response_model=OrderDTO, status_code=status.HTTP_201_CREATED)
async def create_order(
    request: CreateOrderRequest,
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Place a new order.

    Args:
        request: CreateOrderRequest DTO
        service: OrderApplicationService instance

    Returns:
        OrderDTO with generated identifiers
    """
    return await service.create_order(request)


@router.get("/{order_id}", response_model=OrderDTO)
async def get_order(
    order_id: str,
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Get order by ID, with every item and its toppings, dietary requirements and allergies.

    Raises:
        HTTPException: If order not found
    """
    return await service.get_order(_require_short_id(order_id))


@router.get("/{order_id}/status", response_model=OrderStatusDTO)
async def get_order_status(
    order_id: str,
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderStatusDTO:
    """Status page payload, polled by the customer."""
    return await service.get_order_status(_require_short_id(order_id))


@router.patch("/{order_id}/status", response_model=OrderDTO)
async def update_order_status(
    order_id: str,
    request: UpdateOrderStatusRequest,
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Move an order to the next kitchen status.

    Raises:
        HTTPException: 404 if not found, 409 if the move is not a single step forward
    """
    return await service.update_order_status(_require_short_id(order_id), request.status)


@router.get("", response_model=List[OrderDTO])
async def list_orders(
    limit: int = Query(default=100, ge=1, le=1000, description="Maximum number of orders"),
    offset: int = Query(default=0, ge=0, description="Number of orders to skip"),
    order_status: Optional[OrderStatus] = Query(default=None, alias="status", description="Filter by status"),
    topping: Optional[str] = Query(default=None, description="Filter by topping on any item"),
    service: OrderApplicationService = Depends(get_order_service),
) -> List[OrderDTO]:
    """List orders with pagination, newest first."""
    return await service.list_orders(
        limit=limit, offset=offset, status=order_status, topping=topping
    )
