"""
Order Status Enum.

Kitchen states an order moves through, in fixed forward order.
"""
from enum import Enum
from typing import List, Optional


class OrderStatus(str, Enum):
    """Order status values (declaration order is the kitchen order)."""

    PLACED = "Order Placed"
    PREPARING = "Preparing"
    COOKING = "Cooking"
    QUALITY_CHECK = "Quality Check"
    READY = "Ready"

    @classmethod
    def initial(cls) -> "OrderStatus":
        """Status every new order starts in."""
        return cls.PLACED

    @classmethod
    def sequence(cls) -> List["OrderStatus"]:
        """All statuses in kitchen order."""
        return list(cls)

    @property
    def step(self) -> int:
        """Zero-based position in the sequence."""
        return self.sequence().index(self)

    @property
    def is_terminal(self) -> bool:
        return self is OrderStatus.READY

    def next(self) -> Optional["OrderStatus"]:
        """Following status, or None once the order is ready."""
        statuses = self.sequence()
        if self.step + 1 >= len(statuses):
            return None
        return statuses[self.step + 1]

    def can_transition_to(self, target: "OrderStatus") -> bool:
        """Only a single step forward is allowed."""
        return self.next() is target
