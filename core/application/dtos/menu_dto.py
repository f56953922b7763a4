"""Application DTO for the order form vocabularies."""

from typing import Dict, List

from pydantic import BaseModel, Field

from core.domain.enums import OrderStatus
from core.domain.menu import Menu


class MenuDTO(BaseModel):
    """Everything needed to render the order form."""

    pizza_types: List[str] = Field(..., description="Pizza types")
    sizes: List[str] = Field(..., description="Pizza sizes")
    crusts: List[str] = Field(..., description="Crusts")
    topping_categories: Dict[str, List[str]] = Field(..., description="Toppings grouped by category")
    default_toppings: Dict[str, List[str]] = Field(..., description="Default toppings per pizza type")
    dietary_requirements: List[str] = Field(..., description="Dietary requirements")
    allergies: List[str] = Field(..., description="Allergies")
    statuses: List[OrderStatus] = Field(..., description="Kitchen status sequence")

    model_config = {"frozen": True}

    @classmethod
    def from_menu(cls, menu: Menu) -> "MenuDTO":
        return cls(
            pizza_types=list(menu.pizza_types),
            sizes=list(menu.sizes),
            crusts=list(menu.crusts),
            topping_categories={
                category: list(toppings)
                for category, toppings in menu.topping_categories.items()
            },
            default_toppings={
                pizza: list(menu.default_toppings(pizza)) for pizza in menu.pizza_types
            },
            dietary_requirements=list(menu.dietary_requirements),
            allergies=list(menu.allergies),
            statuses=OrderStatus.sequence(),
        )
