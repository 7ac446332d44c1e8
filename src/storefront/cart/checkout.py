"""Turn a cart into the body expected by ``POST /orders``."""

from storefront.cart.state import CartState
from storefront.shipping.rates import fee


def build_order_payload(state: CartState, customer: dict, shipping_location: str) -> dict:
    """Build an order request from the cart and the checkout form.

    ``customer`` carries ``name``, ``email``, ``phone`` and ``address``.
    The shipping fee comes from the shipping table so the server-side tamper
    check accepts it.
    """
    shipping_fee = fee(shipping_location)
    return {
        "customer_name": customer.get("name"),
        "customer_email": customer.get("email"),
        "customer_phone": customer.get("phone"),
        "customer_address": customer.get("address"),
        "shipping_location": shipping_location,
        "shipping_fee": shipping_fee,
        "total_amount": state.total + shipping_fee,
        "items": [
            {
                "product_id": item.product.id,
                "product_name": item.product.name,
                "quantity": item.quantity,
                "price": item.product.price,
                "selected_variants": item.product.selected_variants,
            }
            for item in state.items
        ],
    }
