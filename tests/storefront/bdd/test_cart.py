"""BDD tests for the shopping cart."""

from pytest_bdd import parsers, scenarios, when

from storefront.cart.store import CartStore

scenarios("features/cart.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('{qty:d} of product "{product_id}" priced {price:d} are added'))
def add_product(cart, qty, product_id, price):
    cart.add_item({"id": product_id, "name": f"Product {product_id}", "price": price}, quantity=qty)


@when(parsers.cfparse('the quantity of product "{product_id}" is set to {qty:d}'))
def set_quantity(cart, product_id, qty):
    cart.update_quantity(product_id, qty)


@when(parsers.cfparse('product "{product_id}" is removed'))
def remove_product(cart, product_id):
    cart.remove_item(product_id)


@when("the cart is cleared")
def clear_cart(cart):
    cart.clear_cart()


@when("the cart is reloaded from storage", target_fixture="cart")
def reload_cart(storage):
    return CartStore(storage=storage)
