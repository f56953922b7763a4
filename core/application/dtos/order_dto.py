"""Application DTOs for Order operations."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from core.domain.enums import OrderStatus
from core.domain.menu import MENU


def _check_members(values: List[str], allowed, kind: str) -> List[str]:
    unknown = [value for value in values if not allowed(value)]
    if unknown:
        raise ValueError(f"Unknown {kind}: {', '.join(unknown)}")
    return values


# =============================================================================
# REQUESTS
# =============================================================================

class OrderItemRequest(BaseModel):
    """One pizza as submitted on the order form."""

    pizza: str = Field(..., description="Pizza type")
    size: str = Field(..., description="Pizza size")
    crust: str = Field(default="Regular", description="Crust")
    instructions: str = Field(default="", max_length=500, description="Special instructions")
    toppings: Optional[List[str]] = Field(
        default=None,
        description="Chosen toppings; omit or null to keep the pizza's defaults, [] for none",
    )
    dietary_requirements: List[str] = Field(default_factory=list, description="Dietary requirements")
    allergies: List[str] = Field(default_factory=list, description="Allergies")

    model_config = {"frozen": True}

    @field_validator("pizza")
    @classmethod
    def _valid_pizza(cls, value: str) -> str:
        if not MENU.is_pizza_type(value):
            raise ValueError(f"Unknown pizza type: {value}")
        return value

    @field_validator("size")
    @classmethod
    def _valid_size(cls, value: str) -> str:
        if not MENU.is_size(value):
            raise ValueError(f"Unknown pizza size: {value}")
        return value

    @field_validator("crust")
    @classmethod
    def _valid_crust(cls, value: str) -> str:
        if not MENU.is_crust(value):
            raise ValueError(f"Unknown crust: {value}")
        return value

    @field_validator("toppings")
    @classmethod
    def _valid_toppings(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is None:
            return value
        return _check_members(value, MENU.is_topping, "topping")

    @field_validator("dietary_requirements")
    @classmethod
    def _valid_dietary_requirements(cls, value: List[str]) -> List[str]:
        return _check_members(value, MENU.is_dietary_requirement, "dietary requirement")

    @field_validator("allergies")
    @classmethod
    def _valid_allergies(cls, value: List[str]) -> List[str]:
        return _check_members(value, MENU.is_allergy, "allergy")


class CreateOrderRequest(BaseModel):
    """Request DTO for creating an order."""

    customer_name: str = Field(..., min_length=2, max_length=100, description="Customer name")
    phone: str = Field(..., min_length=6, max_length=20, description="Contact phone")
    address: str = Field(..., min_length=5, max_length=200, description="Delivery address")
    items: List[OrderItemRequest] = Field(..., min_length=1, description="Pizzas in the order")

    model_config = {"frozen": True, "str_strip_whitespace": True}


class UpdateOrderStatusRequest(BaseModel):
    """Request DTO for moving an order along the kitchen sequence."""

    status: OrderStatus = Field(..., description="New order status")


# =============================================================================
# RESPONSES
# =============================================================================

class OrderItemToppingDTO(BaseModel):
    id: str
    order_item_id: str
    topping: str
    is_extra: bool

    model_config = {"frozen": True}


class OrderItemDietaryRequirementDTO(BaseModel):
    id: str
    order_item_id: str
    dietary_requirement: str

    model_config = {"frozen": True}


class OrderItemAllergyDTO(BaseModel):
    id: str
    order_item_id: str
    allergy: str

    model_config = {"frozen": True}


class OrderItemDTO(BaseModel):
    """DTO for order item."""

    id: str = Field(..., description="Item ID")
    order_id: str = Field(..., description="Owning order ID")
    pizza: str = Field(..., description="Pizza type")
    size: str = Field(..., description="Pizza size")
    crust: str = Field(..., description="Crust")
    instructions: str = Field(default="", description="Special instructions")
    toppings: List[OrderItemToppingDTO] = Field(default_factory=list)
    dietary_requirements: List[OrderItemDietaryRequirementDTO] = Field(default_factory=list)
    allergies: List[OrderItemAllergyDTO] = Field(default_factory=list)

    model_config = {"frozen": True}


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    id: str = Field(..., description="Order ID")
    status: OrderStatus = Field(..., description="Order status")
    customer_name: str = Field(..., description="Customer name")
    phone: str = Field(..., description="Contact phone")
    address: str = Field(..., description="Delivery address")
    created_at: datetime = Field(..., description="Creation time")
    items: List[OrderItemDTO] = Field(default_factory=list, description="Order items")

    model_config = {"frozen": True}


class OrderStatusDTO(BaseModel):
    """What the customer status page polls."""

    order_id: str = Field(..., description="Order ID")
    status: OrderStatus = Field(..., description="Current status")
    step: int = Field(..., ge=0, description="Zero-based position of the current status")
    statuses: List[OrderStatus] = Field(..., description="Full kitchen sequence")
    is_ready: bool = Field(..., description="Order reached the final status")

    model_config = {"frozen": True}
