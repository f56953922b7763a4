"""Data layer - infrastructure persistence and mapping."""

from .mappers import OrderItemMapper, OrderMapper
from .models import (
    Base,
    OrderItemAllergyModel,
    OrderItemDietaryRequirementModel,
    OrderItemModel,
    OrderItemToppingModel,
    OrderModel,
)
from .repositories import SqlAlchemyOrderRepository
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "create_uow",
    "OrderItemAllergyModel",
    "OrderItemDietaryRequirementModel",
    "OrderItemMapper",
    "OrderItemModel",
    "OrderItemToppingModel",
    "OrderMapper",
    "OrderModel",
    "SqlAlchemyOrderRepository",
    "UnitOfWork",
]
