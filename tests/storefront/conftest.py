"""Shared fixtures for storefront tests."""

from unittest.mock import patch

import pytest
from protean import current_domain

from storefront.catalogue.product import Product


@pytest.fixture()
def make_product():
    """Factory that stores a product and returns it."""

    def _make(**overrides):
        fields = {
            "name": "Satin Wrap Dress",
            "price": 5000.0,
            "category": "dresses",
            "stock_quantity": 10,
        }
        fields.update(overrides)
        product = Product.create(**fields)
        current_domain.repository_for(Product).add(product)
        return product

    return _make


@pytest.fixture()
def order_payload():
    """Factory for a valid checkout body; overrides replace top-level keys."""

    def _payload(**overrides):
        payload = {
            "customer_name": "Ada Obi",
            "customer_email": "ada@example.com",
            "customer_phone": "08030000000",
            "customer_address": "12 Allen Avenue, Ikeja",
            "shipping_location": "lagos-mainland",
            "shipping_fee": 3500,
            "total_amount": 19700,
            "items": [
                {
                    "product_id": "prod-001",
                    "product_name": "Satin Wrap Dress",
                    "quantity": 3,
                    "price": 5000,
                    "selected_variants": {"size": "M"},
                },
                {
                    "product_id": "prod-002",
                    "product_name": "Beaded Clutch",
                    "quantity": 1,
                    "price": 1200,
                },
            ],
        }
        payload.update(overrides)
        return payload

    return _payload


@pytest.fixture()
def failing_line_writes():
    """Make the memory store reject the Nth OrderItem insert; every other write goes through."""
    from protean.adapters.repository.memory import DictDAO
    from protean.exceptions import DatabaseError

    from storefront.ordering.order import OrderItem

    original_create = DictDAO._create

    def _start(fail_on=2):
        seen = {"lines": 0}

        def _create(dao, model_obj):
            if dao.entity_cls is OrderItem:
                seen["lines"] += 1
                if seen["lines"] >= fail_on:
                    raise DatabaseError("order_items insert failed")
            return original_create(dao, model_obj)

        patcher = patch.object(DictDAO, "_create", _create)
        patcher.start()
        patchers.append(patcher)
        return seen

    patchers = []
    yield _start
    for patcher in patchers:
        patcher.stop()
