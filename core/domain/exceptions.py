"""Domain exceptions for the order aggregate."""
from typing import Optional


class OrderError(Exception):
    """Base class for order errors."""


class InvalidOrderError(OrderError, ValueError):
    """Order graph violates a creation precondition."""


class OrderNotFoundError(OrderError):
    """No order exists with the given identifier."""

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order {order_id} not found")


class InvalidStatusTransitionError(OrderError):
    """Requested status change skips or reverses the kitchen sequence."""

    def __init__(self, order_id: str, current: str, requested: str):
        self.order_id = order_id
        self.current = current
        self.requested = requested
        super().__init__(
            f"Order {order_id} cannot move from '{current}' to '{requested}'"
        )


class OrderStorageError(OrderError):
    """Durable store failed to write or read an order."""

    def __init__(self, message: str, order_id: Optional[str] = None):
        self.order_id = order_id
        super().__init__(message)
