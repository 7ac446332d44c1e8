"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from pytest_bdd import given, parsers, then

from storefront.cart.state import CART_STORAGE_KEY
from storefront.cart.storage.memory_adapter import MemoryCartStorage
from storefront.cart.store import CartStore


@pytest.fixture()
def storage():
    return MemoryCartStorage()


@pytest.fixture()
def error():
    """Container to capture exceptions from When steps."""
    return {}


@given("an empty cart", target_fixture="cart")
def empty_cart(storage):
    return CartStore(storage=storage)


@given(parsers.cfparse('the saved cart contains "{raw}"'))
def saved_cart_contains(storage, raw):
    storage.set(CART_STORAGE_KEY, raw)


@given(
    parsers.cfparse(
        'a cart with {qty1:d} of product "{id1}" priced {price1:d} and {qty2:d} of product "{id2}" priced {price2:d}'
    ),
    target_fixture="cart",
)
def cart_with_two_products(storage, qty1, id1, price1, qty2, id2, price2):
    cart = CartStore(storage=storage)
    cart.add_item({"id": id1, "name": f"Product {id1}", "price": price1}, quantity=qty1)
    cart.add_item({"id": id2, "name": f"Product {id2}", "price": price2}, quantity=qty2)
    return cart


@then(parsers.cfparse("the cart has {count:d} line"))
def cart_has_one_line(cart, count):
    assert len(cart.state.items) == count


@then(parsers.cfparse("the cart has {count:d} lines"))
def cart_has_lines(cart, count):
    assert len(cart.state.items) == count


@then(parsers.cfparse("the cart total is {total:d}"))
def cart_total_is(cart, total):
    assert cart.state.total == total


@then(parsers.cfparse("the cart item count is {count:d}"))
def cart_item_count_is(cart, count):
    assert cart.state.item_count == count
