"""
Pizza shop reference vocabularies.

Fixed lookup tables shared by request validation and the topping
classification policy. Loaded once at import time and never mutated.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple


# ==============================================================================
# MENU TABLES
# ==============================================================================

PIZZA_TYPES = (
    "Margherita",
    "Pepperoni",
    "Vegetarian",
    "Hawaiian",
    "BBQ Chicken",
    "Meat Lovers",
    "Buffalo Chicken",
    "Supreme",
    "Truffle Mushroom",
    "Four Cheese",
    "Vegan Pizza",
    "Vegan Meat Lovers",
    "Vegan Garden",
    "Make Your Own",
    "Garlic",
)

PIZZA_SIZES = ("Small", "Medium", "Large", "X-Large", "Family")

PIZZA_CRUSTS = ("Thin", "Regular", "Deep Dish", "Cheesy Crust", "Vegan Cheesy Crust")

TOPPING_CATEGORIES = {
    "Meats": (
        "Pepperoni", "Sausage", "Chicken", "Bacon", "Ham", "Mince", "Anchovies",
    ),
    "Vegan Meats": (
        "Vegan Pepperoni", "Vegan Chicken", "Vegan Bacon", "Vegan Ham", "Vegan Mince",
    ),
    "Vegetables": (
        "Mushroom", "Red Onion", "White Onion", "Capsicum", "Zucchini",
        "Olives", "Jalapenos", "Pumpkin", "Spinach", "Pineapple",
        "Tomatoes", "Basil", "Corn", "Rocket", "Garlic Slices",
    ),
    "Cheeses": (
        "Mozzarella", "Extra Cheese", "Vegan Cheese", "Parmesan", "Gorgonzola", "Ricotta", "Feta",
    ),
    "Sauces": (
        "Tomato Sauce", "BBQ Sauce", "Buffalo Sauce", "Garlic Oil", "Truffle Oil", "Pesto",
    ),
}

PIZZA_DEFAULT_TOPPINGS = {
    "Margherita": ("Tomato Sauce", "Mozzarella", "Tomatoes", "Basil"),
    "Pepperoni": ("Tomato Sauce", "Mozzarella", "Pepperoni"),
    "Vegetarian": ("Tomato Sauce", "Mozzarella", "Mushroom", "Capsicum", "Red Onion", "Olives", "Zucchini"),
    "Hawaiian": ("Tomato Sauce", "Mozzarella", "Ham", "Pineapple"),
    "BBQ Chicken": ("BBQ Sauce", "Mozzarella", "Chicken", "Red Onion", "Capsicum", "Bacon"),
    "Meat Lovers": ("Tomato Sauce", "Mozzarella", "Pepperoni", "Sausage", "Bacon", "Ham", "Mince"),
    "Buffalo Chicken": ("Buffalo Sauce", "Mozzarella", "Chicken", "Red Onion", "Jalapenos"),
    "Supreme": ("Tomato Sauce", "Mozzarella", "Pepperoni", "Sausage", "Mushroom", "Capsicum", "Red Onion", "Olives"),
    "Truffle Mushroom": ("Truffle Oil", "Mozzarella", "Mushroom", "Garlic Oil", "Rocket"),
    "Four Cheese": ("Tomato Sauce", "Mozzarella", "Parmesan", "Gorgonzola", "Ricotta"),
    "Vegan Pizza": ("Tomato Sauce", "Vegan Cheese", "White Onion", "Basil", "Capsicum", "Garlic Slices", "Corn", "Zucchini"),
    "Vegan Meat Lovers": ("BBQ Sauce", "Vegan Cheese", "White Onion", "Vegan Ham", "Vegan Mince", "Vegan Chicken", "Vegan Bacon", "Vegan Pepperoni"),
    "Vegan Garden": ("Pesto", "Vegan Cheese", "Red Onion", "Mushroom", "Pumpkin", "Capsicum", "Zucchini", "Spinach", "Corn", "Basil", "Rocket"),
    "Garlic": ("Garlic Slices", "Mozzarella", "Garlic Oil"),
    "Make Your Own": (),
}

DIETARY_REQUIREMENTS = ("Vegetarian", "Vegan", "Gluten-Free", "Dairy-Free", "Nut-Free", "Halal", "Kosher")

ALLERGIES = ("Gluten", "Dairy", "Nuts", "Peanuts", "Shellfish", "Soy", "Eggs", "Fish", "Sesame")


# ==============================================================================
# MENU VALUE
# ==============================================================================

@dataclass(frozen=True)
class Menu:
    """Immutable bundle of every vocabulary an order may reference."""

    pizza_types: Tuple[str, ...]
    sizes: Tuple[str, ...]
    crusts: Tuple[str, ...]
    topping_categories: Mapping[str, Tuple[str, ...]]
    default_toppings_by_pizza: Mapping[str, Tuple[str, ...]]
    dietary_requirements: Tuple[str, ...]
    allergies: Tuple[str, ...]

    @property
    def all_toppings(self) -> Tuple[str, ...]:
        """Union of every topping category, first occurrence order."""
        seen = []
        for toppings in self.topping_categories.values():
            for topping in toppings:
                if topping not in seen:
                    seen.append(topping)
        return tuple(seen)

    def default_toppings(self, pizza: str) -> Tuple[str, ...]:
        return self.default_toppings_by_pizza.get(pizza, ())

    def is_pizza_type(self, value: str) -> bool:
        return value in self.pizza_types

    def is_size(self, value: str) -> bool:
        return value in self.sizes

    def is_crust(self, value: str) -> bool:
        return value in self.crusts

    def is_topping(self, value: str) -> bool:
        return any(value in toppings for toppings in self.topping_categories.values())

    def is_dietary_requirement(self, value: str) -> bool:
        return value in self.dietary_requirements

    def is_allergy(self, value: str) -> bool:
        return value in self.allergies


MENU = Menu(
    pizza_types=PIZZA_TYPES,
    sizes=PIZZA_SIZES,
    crusts=PIZZA_CRUSTS,
    topping_categories=MappingProxyType(TOPPING_CATEGORIES),
    default_toppings_by_pizza=MappingProxyType(PIZZA_DEFAULT_TOPPINGS),
    dietary_requirements=DIETARY_REQUIREMENTS,
    allergies=ALLERGIES,
)
