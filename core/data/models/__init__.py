"""Database models."""

from .base import Base
from .order_model import (
    OrderItemAllergyModel,
    OrderItemDietaryRequirementModel,
    OrderItemModel,
    OrderItemToppingModel,
    OrderModel,
)

__all__ = [
    "Base",
    "OrderItemAllergyModel",
    "OrderItemDietaryRequirementModel",
    "OrderItemModel",
    "OrderItemToppingModel",
    "OrderModel",
]
