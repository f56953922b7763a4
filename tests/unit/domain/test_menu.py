"""Tests for the reference vocabularies."""

from core.domain.menu import MENU


def test_every_default_topping_is_a_known_topping():
    for pizza in MENU.pizza_types:
        for topping in MENU.default_toppings(pizza):
            assert MENU.is_topping(topping), f"{pizza}: {topping}"


def test_every_pizza_type_has_a_defaults_entry():
    assert set(MENU.default_toppings_by_pizza) == set(MENU.pizza_types)


def test_topping_lookup_spans_all_categories():
    assert MENU.is_topping("Vegan Mince")
    assert MENU.is_topping("Pesto")
    assert not MENU.is_topping("Chocolate")


def test_all_toppings_has_no_duplicates():
    toppings = MENU.all_toppings
    assert len(toppings) == len(set(toppings))
    assert "Mozzarella" in toppings


def test_unknown_pizza_has_no_defaults():
    assert MENU.default_toppings("Calzone") == ()


def test_vocabulary_membership():
    assert MENU.is_size("Family")
    assert not MENU.is_size("Huge")
    assert MENU.is_crust("Deep Dish")
    assert MENU.is_dietary_requirement("Gluten-Free")
    assert MENU.is_allergy("Sesame")
    assert not MENU.is_allergy("Vegan")
