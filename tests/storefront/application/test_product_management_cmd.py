"""Tests for the back-office product commands."""

import json

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.catalogue.management import AddProduct, RemoveProduct, UpdateProduct
from storefront.catalogue.product import Product, load_labels


def _add(**overrides):
    fields = {"name": "Satin Wrap Dress", "price": 18500, "category": "dresses", "stock_quantity": 12}
    fields.update(overrides)
    return current_domain.process(AddProduct(**fields), asynchronous=False)


class TestAddProduct:
    def test_stores_product(self):
        product_id = _add(sizes=json.dumps(["S", "M"]), is_featured=True)

        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "Satin Wrap Dress"
        assert product.is_featured is True
        assert load_labels(product.sizes) == ["S", "M"]

    @pytest.mark.parametrize("missing", ["name", "price", "category"])
    def test_required_fields(self, missing):
        with pytest.raises(ValidationError) as exc:
            _add(**{missing: None})

        assert missing in exc.value.messages


class TestUpdateProduct:
    def test_replaces_fields(self):
        product_id = _add(colors=json.dumps(["Wine"]))

        current_domain.process(
            UpdateProduct(product_id=product_id, name="Wrap Dress", price=17000, category="sale"),
            asynchronous=False,
        )

        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "Wrap Dress"
        assert product.price == 17000
        assert product.category == "sale"
        assert load_labels(product.colors) == []

    def test_unknown_product(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                UpdateProduct(product_id="missing", name="x", price=1, category="y"),
                asynchronous=False,
            )


class TestRemoveProduct:
    def test_deletes_product(self):
        product_id = _add()

        current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)

        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Product).get(product_id)
