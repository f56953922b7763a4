"""Static mappers for domain entities ↔ database models."""

from datetime import datetime, timezone
from typing import Callable, Optional

from core.domain.entities.order import (
    Order,
    OrderItem,
    OrderItemAllergy,
    OrderItemDietaryRequirement,
    OrderItemTopping,
)
from core.domain.enums import OrderStatus
from core.domain.exceptions import OrderStorageError

from .models.order_model import (
    OrderItemAllergyModel,
    OrderItemDietaryRequirementModel,
    OrderItemModel,
    OrderItemToppingModel,
    OrderModel,
)

IdFactory = Callable[[], str]


def _ensure_id(entity, id_factory: IdFactory) -> str:
    """Give the entity an identifier if it has none yet."""
    if not entity.id:
        entity.id = id_factory()
    return entity.id


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite drops the offset; stored times are always UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _stored_status(model: OrderModel) -> OrderStatus:
    try:
        return OrderStatus(model.status)
    except ValueError as e:
        raise OrderStorageError(
            f"Order {model.id} has unknown stored status {model.status!r}", order_id=model.id
        ) from e


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel, junction rows included."""

    @staticmethod
    def to_domain(model: OrderItemModel) -> OrderItem:
        """Convert ORM model to domain entity.

        Args:
            model: OrderItemModel with junction collections loaded

        Returns:
            OrderItem domain entity
        """
        return OrderItem(
            id=model.id,
            order_id=model.order_id,
            pizza=model.pizza,
            size=model.size,
            crust=model.crust,
            instructions=model.instructions or "",
            toppings=[
                OrderItemTopping(
                    id=row.id,
                    order_item_id=row.order_item_id,
                    topping=row.topping,
                    is_extra=bool(row.is_extra),
                )
                for row in model.toppings
            ],
            dietary_requirements=[
                OrderItemDietaryRequirement(
                    id=row.id,
                    order_item_id=row.order_item_id,
                    dietary_requirement=row.dietary_requirement,
                )
                for row in model.dietary_requirements
            ],
            allergies=[
                OrderItemAllergy(
                    id=row.id,
                    order_item_id=row.order_item_id,
                    allergy=row.allergy,
                )
                for row in model.allergies
            ],
        )

    @staticmethod
    def to_persistence(
        entity: OrderItem, order_id: str, position: int, id_factory: IdFactory
    ) -> OrderItemModel:
        """Convert domain entity to ORM model, assigning missing ids.

        Args:
            entity: OrderItem domain entity
            order_id: Owning order id
            position: Insertion index within the order
            id_factory: Identifier generator

        Returns:
            OrderItemModel instance
        """
        item_id = _ensure_id(entity, id_factory)
        entity.order_id = order_id

        model = OrderItemModel(
            id=item_id,
            order_id=order_id,
            position=position,
            pizza=entity.pizza,
            size=entity.size,
            crust=entity.crust,
            instructions=entity.instructions or "",
        )

        for index, topping in enumerate(entity.toppings):
            topping.order_item_id = item_id
            model.toppings.append(
                OrderItemToppingModel(
                    id=_ensure_id(topping, id_factory),
                    order_item_id=item_id,
                    position=index,
                    topping=topping.topping,
                    is_extra=topping.is_extra,
                )
            )

        for index, requirement in enumerate(entity.dietary_requirements):
            requirement.order_item_id = item_id
            model.dietary_requirements.append(
                OrderItemDietaryRequirementModel(
                    id=_ensure_id(requirement, id_factory),
                    order_item_id=item_id,
                    position=index,
                    dietary_requirement=requirement.dietary_requirement,
                )
            )

        for index, allergy in enumerate(entity.allergies):
            allergy.order_item_id = item_id
            model.allergies.append(
                OrderItemAllergyModel(
                    id=_ensure_id(allergy, id_factory),
                    order_item_id=item_id,
                    position=index,
                    allergy=allergy.allergy,
                )
            )

        return model


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested items).

        Args:
            model: OrderModel instance

        Returns:
            Order domain aggregate

        Raises:
            OrderStorageError: If the stored status is not a known status
        """
        return Order(
            id=model.id,
            status=_stored_status(model),
            customer_name=model.customer_name,
            phone=model.phone,
            address=model.address,
            created_at=_as_utc(model.created_at),
            items=[OrderItemMapper.to_domain(item_model) for item_model in model.items],
        )

    @staticmethod
    def to_persistence(entity: Order, id_factory: IdFactory) -> OrderModel:
        """Convert domain aggregate to ORM model (with nested items).

        Identifiers are assigned here, row by row, right before each row
        is constructed, and written back onto the domain entities.

        Args:
            entity: Order domain aggregate
            id_factory: Identifier generator

        Returns:
            OrderModel instance
        """
        order_id = _ensure_id(entity, id_factory)

        order_model = OrderModel(
            id=order_id,
            status=entity.status.value,
            customer_name=entity.customer_name,
            phone=entity.phone,
            address=entity.address,
            created_at=entity.created_at,
        )

        order_model.items = [
            OrderItemMapper.to_persistence(item, order_id, position, id_factory)
            for position, item in enumerate(entity.items)
        ]

        return order_model
