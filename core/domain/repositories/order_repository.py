"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.order import Order
from ..enums import OrderStatus


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def add(self, order: Order) -> Order:
        """Persist a new order graph (header, items and junction rows).

        Identifiers missing anywhere in the graph are generated and written
        back onto the entities.

        Args:
            order: Fully built Order aggregate

        Returns:
            The same order with identifiers filled in
        """
        pass

    @abstractmethod
    async def find_by_id(self, order_id: str) -> Optional[Order]:
        """Retrieve a fully hydrated order by identifier.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
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
        pass

    @abstractmethod
    async def find_by_topping(
        self,
        topping: str,
        limit: int = 100,
        offset: int = 0,
        status: Optional[OrderStatus] = None,
    ) -> List[Order]:
        """Orders with at least one item carrying the given topping, newest first."""
        pass

    @abstractmethod
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
        pass
