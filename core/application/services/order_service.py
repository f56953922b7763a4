"""Application service for Order operations."""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.menu_dto import MenuDTO
from core.application.dtos.order_dto import (
    CreateOrderRequest,
    OrderDTO,
    OrderItemAllergyDTO,
    OrderItemDietaryRequirementDTO,
    OrderItemDTO,
    OrderItemToppingDTO,
    OrderStatusDTO,
)
from core.data.mappers import IdFactory
from core.data.uow import create_uow
from core.domain.entities.order import Order, OrderItem
from core.domain.enums import OrderStatus
from core.domain.exceptions import InvalidStatusTransitionError, OrderNotFoundError
from core.domain.menu import MENU, Menu
from core.domain.value_objects import ToppingSelection, new_short_id

logger = logging.getLogger(__name__)


class OrderApplicationService:
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Turn validated requests into order graphs (default/extra toppings)
    - Handle transactions via UoW, one per call
    - Own status transition rules for the kitchen workflow
    - Transform between DTOs and domain entities
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        menu: Menu = MENU,
        id_factory: IdFactory = new_short_id,
    ) -> None:
        """Initialize order application service.

        Args:
            session_factory: SQLAlchemy async session factory
            menu: Reference vocabularies
            id_factory: Identifier generator for new rows
        """
        self._session_factory = session_factory
        self._menu = menu
        self._id_factory = id_factory

    async def create_order(self, request: CreateOrderRequest) -> OrderDTO:
        """Create a new order with all its items and junction rows.

        Args:
            request: Validated CreateOrderRequest DTO

        Returns:
            OrderDTO with generated identifiers

        Raises:
            InvalidOrderError: If the order graph is incomplete
            OrderStorageError: If nothing could be persisted
        """
        order = self._request_to_order(request)

        async with create_uow(self._session_factory, self._id_factory) as uow:
            await uow.orders.add(order)
            await uow.commit()

        logger.info(f"Order {order.id} placed ({len(order.items)} item(s))")
        return self._order_to_dto(order)

    async def get_order(self, order_id: str) -> OrderDTO:
        """Get a fully hydrated order.

        Raises:
            OrderNotFoundError: If no such order exists
        """
        return self._order_to_dto(await self._load(order_id))

    async def get_order_status(self, order_id: str) -> OrderStatusDTO:
        """Status page payload for one order.

        Raises:
            OrderNotFoundError: If no such order exists
        """
        order = await self._load(order_id)
        return OrderStatusDTO(
            order_id=order.id,
            status=order.status,
            step=order.status.step,
            statuses=OrderStatus.sequence(),
            is_ready=order.is_ready,
        )

    async def update_order_status(self, order_id: str, status: OrderStatus) -> OrderDTO:
        """Move an order one step along the kitchen sequence.

        Args:
            order_id: Order identifier
            status: Requested status, must be the immediate successor

        Returns:
            OrderDTO after the change

        Raises:
            OrderNotFoundError: If no such order exists
            InvalidStatusTransitionError: If the move skips or goes backwards
        """
        async with create_uow(self._session_factory, self._id_factory) as uow:
            order = await uow.orders.find_by_id(order_id)
            if order is None:
                raise OrderNotFoundError(order_id)

            current = order.status
            if not current.can_transition_to(status):
                raise InvalidStatusTransitionError(order_id, current.value, status.value)

            # Guard against a concurrent move between read and write
            updated = await uow.orders.update_status(order_id, status, expected=current)
            if not updated:
                raise InvalidStatusTransitionError(order_id, current.value, status.value)

            await uow.commit()

        order.status = status
        logger.info(f"Order {order_id} moved from '{current.value}' to '{status.value}'")
        return self._order_to_dto(order)

    async def list_orders(
        self,
        limit: int = 100,
        offset: int = 0,
        status: Optional[OrderStatus] = None,
        topping: Optional[str] = None,
    ) -> List[OrderDTO]:
        """List orders with pagination, newest first.

        Args:
            limit: Maximum number of orders to return
            offset: Number of orders to skip
            status: Only orders currently in this status
            topping: Only orders with an item carrying this topping

        Returns:
            List of OrderDTO instances
        """
        async with create_uow(self._session_factory, self._id_factory) as uow:
            if topping is not None:
                orders = await uow.orders.find_by_topping(
                    topping, limit=limit, offset=offset, status=status
                )
            else:
                orders = await uow.orders.find_all(limit=limit, offset=offset, status=status)
        return [self._order_to_dto(order) for order in orders]

    def get_order_form(self) -> MenuDTO:
        """Vocabularies the order form is rendered from."""
        return MenuDTO.from_menu(self._menu)

    async def _load(self, order_id: str) -> Order:
        async with create_uow(self._session_factory, self._id_factory) as uow:
            order = await uow.orders.find_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    def _request_to_order(self, request: CreateOrderRequest) -> Order:
        """Transform CreateOrderRequest DTO to Order domain entity.

        Args:
            request: CreateOrderRequest DTO

        Returns:
            Order domain entity in its initial status
        """
        items = [
            OrderItem.build(
                pizza=item.pizza,
                size=item.size,
                crust=item.crust,
                instructions=item.instructions,
                selection=ToppingSelection.from_optional(item.toppings),
                dietary_requirements=item.dietary_requirements,
                allergies=item.allergies,
                menu=self._menu,
            )
            for item in request.items
        ]

        return Order(
            customer_name=request.customer_name,
            phone=request.phone,
            address=request.address,
            items=items,
            status=OrderStatus.initial(),
        )

    def _order_to_dto(self, order: Order) -> OrderDTO:
        """Transform Order domain entity to OrderDTO.

        Args:
            order: Order domain entity

        Returns:
            OrderDTO instance
        """
        items = [
            OrderItemDTO(
                id=item.id,
                order_id=item.order_id,
                pizza=item.pizza,
                size=item.size,
                crust=item.crust,
                instructions=item.instructions,
                toppings=[
                    OrderItemToppingDTO(
                        id=row.id,
                        order_item_id=row.order_item_id,
                        topping=row.topping,
                        is_extra=row.is_extra,
                    )
                    for row in item.toppings
                ],
                dietary_requirements=[
                    OrderItemDietaryRequirementDTO(
                        id=row.id,
                        order_item_id=row.order_item_id,
                        dietary_requirement=row.dietary_requirement,
                    )
                    for row in item.dietary_requirements
                ],
                allergies=[
                    OrderItemAllergyDTO(
                        id=row.id,
                        order_item_id=row.order_item_id,
                        allergy=row.allergy,
                    )
                    for row in item.allergies
                ],
            )
            for item in order.items
        ]

        return OrderDTO(
            id=order.id,
            status=order.status,
            customer_name=order.customer_name,
            phone=order.phone,
            address=order.address,
            created_at=order.created_at,
            items=items,
        )
