"""Topping selection value object."""
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class ToppingSelection:
    """
    What the customer asked for on one pizza.

    Three states:
    - unset: customer never customised, the pizza's defaults apply
    - explicit empty: customer removed everything, no toppings at all
    - explicit list: exactly these toppings, in the given order
    """
    labels: Optional[Tuple[str, ...]] = None

    @classmethod
    def unset(cls) -> "ToppingSelection":
        return cls(labels=None)

    @classmethod
    def of(cls, labels: Iterable[str]) -> "ToppingSelection":
        return cls(labels=tuple(labels))

    @classmethod
    def from_optional(cls, labels: Optional[Iterable[str]]) -> "ToppingSelection":
        """Map a nullable list (None means not customised)."""
        if labels is None:
            return cls.unset()
        return cls.of(labels)

    @property
    def is_unset(self) -> bool:
        return self.labels is None

    @property
    def is_empty(self) -> bool:
        return self.labels is not None and len(self.labels) == 0
