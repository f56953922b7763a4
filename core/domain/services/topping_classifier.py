"""
Default-vs-extra topping classification.

Compares what the customer selected against the pizza's canonical
defaults. Pure function over the menu, no persistence concerns.
"""
from typing import Iterable, List, Tuple

from ..menu import MENU, Menu
from ..value_objects import ToppingSelection


def unique_labels(labels: Iterable[str]) -> List[str]:
    """Drop repeated labels, keeping the first occurrence order."""
    seen: List[str] = []
    for label in labels:
        if label not in seen:
            seen.append(label)
    return seen


def classify_toppings(
    pizza: str,
    selection: ToppingSelection,
    menu: Menu = MENU,
) -> List[Tuple[str, bool]]:
    """
    Resolve a selection into (topping, is_extra) pairs.

    Args:
        pizza: Pizza type name
        selection: Customer topping selection
        menu: Reference vocabularies

    Returns:
        Ordered pairs; defaults are never extra
    """
    defaults = menu.default_toppings(pizza)

    if selection.is_unset:
        return [(topping, False) for topping in defaults]

    return [
        (topping, topping not in defaults)
        for topping in unique_labels(selection.labels)
    ]
