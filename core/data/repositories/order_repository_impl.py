"""SQLAlchemy implementation of OrderRepository."""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from core.domain.entities.order import Order
from core.domain.enums import OrderStatus
from core.domain.exceptions import OrderStorageError
from core.domain.repositories.order_repository import OrderRepository
from core.domain.value_objects import new_short_id

from ..mappers import IdFactory, OrderMapper
from ..models.order_model import OrderItemModel, OrderItemToppingModel, OrderModel

logger = logging.getLogger(__name__)


def _hydrated():
    """Eager-load options: one query per collection level, never per item."""
    return (
        selectinload(OrderModel.items).options(
            selectinload(OrderItemModel.toppings),
            selectinload(OrderItemModel.dietary_requirements),
            selectinload(OrderItemModel.allergies),
        ),
    )


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession, id_factory: IdFactory = new_short_id) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
            id_factory: Generator for order, item and junction row ids
        """
        self._session = session
        self._id_factory = id_factory

    async def add(self, order: Order) -> Order:
        """Persist a new order graph.

        Args:
            order: Order domain aggregate

        Returns:
            The order with identifiers and creation time filled in

        Raises:
            InvalidOrderError: If creation preconditions are not met
            OrderStorageError: If the store rejects the write
        """
        order.check_invariants()

        if order.created_at is None:
            order.created_at = datetime.now(timezone.utc)

        order_model = OrderMapper.to_persistence(order, self._id_factory)

        try:
            self._session.add(order_model)
            await self._session.flush()  # Propagate to DB without committing
        except SQLAlchemyError as e:
            logger.error(f"Failed to write order {order.id}: {e}")
            raise OrderStorageError(f"Failed to write order {order.id}", order_id=order.id) from e

        logger.info(f"Order {order.id} written with {len(order.items)} item(s)")
        return order

    async def find_by_id(self, order_id: str) -> Optional[Order]:
        """Retrieve a fully hydrated order.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        try:
            result = await self._session.execute(
                select(OrderModel)
                .options(*_hydrated())
                .where(OrderModel.id == order_id)
            )
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Failed to read order {order_id}: {e}")
            raise OrderStorageError(f"Failed to read order {order_id}", order_id=order_id) from e

        if not model:
            logger.info(f"Order not found: {order_id}")
            return None

        return OrderMapper.to_domain(model)

    async def find_all(
        self,
        limit: int = 100,
        offset: int = 0,
        status: Optional[OrderStatus] = None,
    ) -> List[Order]:
        """List orders, newest first.

        Args:
            limit: Maximum number of orders to return
            offset: Number of orders to skip
            status: Only orders currently in this status

        Returns:
            List of Order aggregates
        """
        return await self._list(select(OrderModel), limit, offset, status)

    async def find_by_topping(
        self,
        topping: str,
        limit: int = 100,
        offset: int = 0,
        status: Optional[OrderStatus] = None,
    ) -> List[Order]:
        """Orders with at least one item carrying the given topping.

        Args:
            topping: Topping label
            limit: Maximum number of orders to return
            offset: Number of orders to skip
            status: Only orders currently in this status

        Returns:
            List of Order aggregates, newest first
        """
        matching = (
            select(OrderItemModel.order_id)
            .join(OrderItemToppingModel, OrderItemToppingModel.order_item_id == OrderItemModel.id)
            .where(OrderItemToppingModel.topping == topping)
        )
        query = select(OrderModel).where(OrderModel.id.in_(matching))

        return await self._list(query, limit, offset, status)

    async def update_status(
        self,
        order_id: str,
        status: OrderStatus,
        expected: Optional[OrderStatus] = None,
    ) -> bool:
        """Persist a new status.

        Args:
            order_id: Order identifier
            status: New status
            expected: Only update if the stored status still equals this

        Returns:
            True if a row was updated, False otherwise
        """
        statement = update(OrderModel).where(OrderModel.id == order_id)
        if expected is not None:
            statement = statement.where(OrderModel.status == expected.value)

        try:
            result = await self._session.execute(
                statement.values(status=status.value).execution_options(
                    synchronize_session=False
                )
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to update status of order {order_id}: {e}")
            raise OrderStorageError(
                f"Failed to update status of order {order_id}", order_id=order_id
            ) from e

        return result.rowcount > 0

    # =========================================================================
    # PRIVATE METHODS
    # =========================================================================

    async def _list(
        self, query, limit: int, offset: int, status: Optional[OrderStatus]
    ) -> List[Order]:
        """Hydrate, filter and page an order query, newest first."""
        query = query.options(*_hydrated())
        if status is not None:
            query = query.where(OrderModel.status == status.value)
        query = query.order_by(OrderModel.created_at.desc()).limit(limit).offset(offset)

        try:
            result = await self._session.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"Failed to list orders: {e}")
            raise OrderStorageError("Failed to list orders") from e

        return [OrderMapper.to_domain(model) for model in result.scalars().all()]
