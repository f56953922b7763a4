"""Tests for Order aggregate invariants and short ids."""

import pytest

from core.domain.entities import Order, OrderItem
from core.domain.exceptions import InvalidOrderError
from core.domain.value_objects import ShortID, new_short_id


def _order(**overrides) -> Order:
    fields = dict(
        customer_name="Sam",
        phone="0400000000",
        address="1 Main Road",
        items=[OrderItem.build(pizza="Supreme", size="Large", crust="Regular")],
    )
    fields.update(overrides)
    return Order(**fields)


def test_valid_order_passes_invariants():
    _order().check_invariants()


def test_order_without_items_is_rejected():
    with pytest.raises(InvalidOrderError, match="at least one item"):
        _order(items=[]).check_invariants()


@pytest.mark.parametrize("field", ["customer_name", "phone", "address"])
def test_blank_header_field_is_rejected(field):
    with pytest.raises(InvalidOrderError):
        _order(**{field: "   "}).check_invariants()


def test_invalid_order_error_is_a_value_error():
    assert issubclass(InvalidOrderError, ValueError)


def test_generated_short_ids_are_url_safe_and_fit_key_columns():
    ids = {new_short_id() for _ in range(500)}

    assert len(ids) == 500
    for value in ids:
        assert len(value) == 12
        assert ShortID.is_valid(value)

    # Every character position carries random bits
    assert all(len({value[i] for value in ids}) > 4 for i in range(12))


@pytest.mark.parametrize("value", ["", "has space", "x" * 15, "slash/id"])
def test_malformed_short_ids_are_rejected(value):
    assert not ShortID.is_valid(value)
    with pytest.raises(ValueError):
        ShortID(value=value)
