"""Domain layer - pure domain models and interfaces."""

from .entities import (
    Order,
    OrderItem,
    OrderItemAllergy,
    OrderItemDietaryRequirement,
    OrderItemTopping,
)
from .enums import OrderStatus
from .exceptions import (
    InvalidOrderError,
    InvalidStatusTransitionError,
    OrderError,
    OrderNotFoundError,
    OrderStorageError,
)
from .menu import MENU, Menu
from .repositories import OrderRepository
from .value_objects import ShortID, ToppingSelection

__all__ = [
    "InvalidOrderError",
    "InvalidStatusTransitionError",
    "MENU",
    "Menu",
    "Order",
    "OrderError",
    "OrderItem",
    "OrderItemAllergy",
    "OrderItemDietaryRequirement",
    "OrderItemTopping",
    "OrderNotFoundError",
    "OrderRepository",
    "OrderStatus",
    "OrderStorageError",
    "ShortID",
    "ToppingSelection",
]
