"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional

from ..enums import OrderStatus
from ..exceptions import InvalidOrderError
from ..menu import MENU, Menu
from ..services.topping_classifier import classify_toppings, unique_labels
from ..value_objects import ToppingSelection


@dataclass
class OrderItemTopping:
    """One topping on one pizza, with its upcharge flag."""
    topping: str
    is_extra: bool = False
    id: Optional[str] = None
    order_item_id: Optional[str] = None


@dataclass
class OrderItemDietaryRequirement:
    dietary_requirement: str
    id: Optional[str] = None
    order_item_id: Optional[str] = None


@dataclass
class OrderItemAllergy:
    allergy: str
    id: Optional[str] = None
    order_item_id: Optional[str] = None


@dataclass
class OrderItem:
    """One pizza within an order."""
    pizza: str
    size: str
    crust: str
    instructions: str = ""
    toppings: List[OrderItemTopping] = field(default_factory=list)
    dietary_requirements: List[OrderItemDietaryRequirement] = field(default_factory=list)
    allergies: List[OrderItemAllergy] = field(default_factory=list)
    id: Optional[str] = None
    order_id: Optional[str] = None

    @classmethod
    def build(
        cls,
        pizza: str,
        size: str,
        crust: str,
        instructions: str = "",
        selection: Optional[ToppingSelection] = None,
        dietary_requirements: Iterable[str] = (),
        allergies: Iterable[str] = (),
        menu: Menu = MENU,
    ) -> "OrderItem":
        """
        Build an item with its junction collections resolved.

        Vocabulary membership is a caller precondition and is not
        re-checked here.
        """
        selection = selection or ToppingSelection.unset()

        return cls(
            pizza=pizza,
            size=size,
            crust=crust,
            instructions=instructions or "",
            toppings=[
                OrderItemTopping(topping=topping, is_extra=is_extra)
                for topping, is_extra in classify_toppings(pizza, selection, menu)
            ],
            dietary_requirements=[
                OrderItemDietaryRequirement(dietary_requirement=label)
                for label in unique_labels(dietary_requirements)
            ],
            allergies=[
                OrderItemAllergy(allergy=label)
                for label in unique_labels(allergies)
            ],
        )

    @property
    def extra_toppings(self) -> List[str]:
        return [t.topping for t in self.toppings if t.is_extra]


@dataclass
class Order:
    """
    Order aggregate root.

    Owns its items exclusively; each item owns its topping, dietary
    requirement and allergy rows. Only the status changes after creation.
    """
    customer_name: str
    phone: str
    address: str
    items: List[OrderItem] = field(default_factory=list)
    status: OrderStatus = OrderStatus.PLACED
    id: Optional[str] = None
    created_at: Optional[datetime] = None

    def check_invariants(self) -> None:
        """
        Validate creation preconditions.

        Raises:
            InvalidOrderError: If a header field is blank or there are no items
        """
        for name in ("customer_name", "phone", "address"):
            value = getattr(self, name)
            if not value or not value.strip():
                raise InvalidOrderError(f"Order {name} cannot be empty")

        if not self.items:
            raise InvalidOrderError("Order must contain at least one item")

        if not isinstance(self.status, OrderStatus):
            raise InvalidOrderError(f"Unknown order status: {self.status!r}")

    @property
    def is_ready(self) -> bool:
        return self.status.is_terminal
