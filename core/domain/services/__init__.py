"""Domain services."""

from .topping_classifier import classify_toppings, unique_labels

__all__ = ["classify_toppings", "unique_labels"]
