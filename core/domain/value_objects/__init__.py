"""Domain value objects."""

from .short_id import ShortID, new_short_id
from .topping_selection import ToppingSelection

__all__ = [
    "ShortID",
    "ToppingSelection",
    "new_short_id",
]
