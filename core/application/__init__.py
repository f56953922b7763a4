"""Application layer - services and DTOs."""

from .dtos import (
    CreateOrderRequest,
    MenuDTO,
    OrderDTO,
    OrderItemDTO,
    OrderItemRequest,
    OrderStatusDTO,
    UpdateOrderStatusRequest,
)
from .services import OrderApplicationService

__all__ = [
    # DTOs
    "CreateOrderRequest",
    "MenuDTO",
    "OrderDTO",
    "OrderItemDTO",
    "OrderItemRequest",
    "OrderStatusDTO",
    "UpdateOrderStatusRequest",
    # Services
    "OrderApplicationService",
]
