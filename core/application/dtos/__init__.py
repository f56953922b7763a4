"""Application DTOs."""

from .menu_dto import MenuDTO
from .order_dto import (
    CreateOrderRequest,
    OrderDTO,
    OrderItemAllergyDTO,
    OrderItemDietaryRequirementDTO,
    OrderItemDTO,
    OrderItemRequest,
    OrderItemToppingDTO,
    OrderStatusDTO,
    UpdateOrderStatusRequest,
)

__all__ = [
    "CreateOrderRequest",
    "MenuDTO",
    "OrderDTO",
    "OrderItemAllergyDTO",
    "OrderItemDietaryRequirementDTO",
    "OrderItemDTO",
    "OrderItemRequest",
    "OrderItemToppingDTO",
    "OrderStatusDTO",
    "UpdateOrderStatusRequest",
]
