"""Domain entities."""

from .order import (
    Order,
    OrderItem,
    OrderItemAllergy,
    OrderItemDietaryRequirement,
    OrderItemTopping,
)

__all__ = [
    "Order",
    "OrderItem",
    "OrderItemAllergy",
    "OrderItemDietaryRequirement",
    "OrderItemTopping",
]
