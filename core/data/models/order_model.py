"""SQLAlchemy ORM models for Order aggregate."""

from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from core.domain.enums import OrderStatus

from .base import Base

ID_SIZE = 14


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    id = Column(String(ID_SIZE), primary_key=True)
    status = Column(String(32), nullable=False, default=OrderStatus.PLACED.value, index=True)
    customer_name = Column(String(100), nullable=False)
    phone = Column(String(20), nullable=False)
    address = Column(String(200), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.position",
    )

    __table_args__ = (
        Index("ix_orders_created_at", "created_at"),
    )

    def __repr__(self):
        return f"<OrderModel(id={self.id}, status={self.status})>"


class OrderItemModel(Base):
    """SQLAlchemy ORM model for order_items table."""

    __tablename__ = "order_items"

    id = Column(String(ID_SIZE), primary_key=True)
    order_id = Column(
        String(ID_SIZE), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position = Column(Integer, nullable=False, default=0)
    size = Column(String(20), nullable=False)
    pizza = Column(String(50), nullable=False)
    crust = Column(String(50), nullable=False)
    instructions = Column(Text, nullable=False, default="")

    order = relationship("OrderModel", back_populates="items")

    toppings = relationship(
        "OrderItemToppingModel",
        cascade="all, delete-orphan",
        order_by="OrderItemToppingModel.position",
    )
    dietary_requirements = relationship(
        "OrderItemDietaryRequirementModel",
        cascade="all, delete-orphan",
        order_by="OrderItemDietaryRequirementModel.position",
    )
    allergies = relationship(
        "OrderItemAllergyModel",
        cascade="all, delete-orphan",
        order_by="OrderItemAllergyModel.position",
    )

    def __repr__(self):
        return f"<OrderItemModel(id={self.id}, pizza={self.pizza}, size={self.size})>"


# =============================================================================
# JUNCTION ROWS
# =============================================================================

class OrderItemToppingModel(Base):
    """One topping attached to one order item."""

    __tablename__ = "order_item_toppings"

    id = Column(String(ID_SIZE), primary_key=True)
    order_item_id = Column(
        String(ID_SIZE), ForeignKey("order_items.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position = Column(Integer, nullable=False, default=0)
    topping = Column(String(50), nullable=False, index=True)
    is_extra = Column(Boolean, nullable=False, default=False)

    __table_args__ = (
        UniqueConstraint("order_item_id", "topping", name="uq_order_item_toppings_item_topping"),
    )


class OrderItemDietaryRequirementModel(Base):
    """One dietary requirement attached to one order item."""

    __tablename__ = "order_item_dietary_requirements"

    id = Column(String(ID_SIZE), primary_key=True)
    order_item_id = Column(
        String(ID_SIZE), ForeignKey("order_items.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position = Column(Integer, nullable=False, default=0)
    dietary_requirement = Column(String(50), nullable=False)

    __table_args__ = (
        UniqueConstraint(
            "order_item_id", "dietary_requirement", name="uq_order_item_dietary_item_requirement"
        ),
    )


class OrderItemAllergyModel(Base):
    """One allergy attached to one order item."""

    __tablename__ = "order_item_allergies"

    id = Column(String(ID_SIZE), primary_key=True)
    order_item_id = Column(
        String(ID_SIZE), ForeignKey("order_items.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position = Column(Integer, nullable=False, default=0)
    allergy = Column(String(50), nullable=False)

    __table_args__ = (
        UniqueConstraint("order_item_id", "allergy", name="uq_order_item_allergies_item_allergy"),
    )
