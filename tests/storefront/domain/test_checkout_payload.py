"""Tests for turning a cart into an order request."""

from storefront.cart.checkout import build_order_payload
from storefront.cart.storage.memory_adapter import MemoryCartStorage
from storefront.cart.store import CartStore

CUSTOMER = {
    "name": "Ada Obi",
    "email": "ada@example.com",
    "phone": "08030000000",
    "address": "12 Allen Avenue, Ikeja",
}

def _cart():
    store = CartStore(storage=MemoryCartStorage())
    store.add_item({"id": "p1", "name": "Satin Wrap Dress", "price": 5000, "size": "M"}, quantity=3)
    store.add_item({"id": "p2", "name": "Beaded Clutch", "price": 1200})
    return store.state

def test_payload_uses_shipping_table_fee():
    payload = build_order_payload(_cart(), CUSTOMER, "lagos-mainland")

    assert payload["shipping_fee"] == 3500
    assert payload["total_amount"] == 16200 + 3500

def test_payload_has_one_entry_per_line():
    payload = build_order_payload(_cart(), CUSTOMER, "pickup")

    assert payload["items"] == [
        {
            "product_id": "p1",
            "product_name": "Satin Wrap Dress",
            "quantity": 3,
            "price": 5000,
            "selected_variants": {"size": "M"},
        },
        {
            "product_id": "p2",
            "product_name": "Beaded Clutch",
            "quantity": 1,
            "price": 1200,
            "selected_variants": {},
        },
    ]
    assert payload["total_amount"] == 16200

def test_payload_copies_customer_details():
    payload = build_order_payload(_cart(), CUSTOMER, "pickup")

    assert payload["customer_name"] == "Ada Obi"
    assert payload["customer_email"] == "ada@example.com"
    assert payload["customer_phone"] == "08030000000"
    assert payload["customer_address"] == "12 Allen Avenue, Ikeja"
    assert payload["shipping_location"] == "pickup"
