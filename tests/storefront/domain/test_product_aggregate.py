"""Tests for the Product aggregate."""

import json

import pytest
from protean.exceptions import ValidationError
from protean.utils.reflection import declared_fields

from storefront.catalogue.events import ProductAdded, ProductDetailsUpdated, StockDecremented
from storefront.catalogue.product import Product, dump_labels, load_labels


class TestProductConstruction:
    def test_element_type(self):
        from protean.utils import DomainObjects

        assert Product.element_type == DomainObjects.AGGREGATE

    def test_declared_fields(self):
        fields = declared_fields(Product)
        for name in (
            "name",
            "description",
            "price",
            "image_url",
            "image_urls",
            "category",
            "stock_quantity",
            "is_featured",
            "sizes",
            "colors",
            "designs",
            "created_at",
            "updated_at",
        ):
            assert name in fields

    def test_create_minimal(self):
        product = Product.create(name="Satin Wrap Dress", price=5000, category="dresses")

        assert product.stock_quantity == 0
        assert product.is_featured is False
        assert load_labels(product.sizes) == []
        assert product.created_at is not None

    def test_create_stores_label_lists_as_json(self):
        product = Product.create(
            name="Satin Wrap Dress",
            price=5000,
            category="dresses",
            sizes=["S", "M", ""],
            colors=["Wine"],
            image_urls=["https://cdn.example.com/a.jpg"],
        )

        assert json.loads(product.sizes) == ["S", "M"]
        assert load_labels(product.colors) == ["Wine"]
        assert load_labels(product.image_urls) == ["https://cdn.example.com/a.jpg"]

    def test_create_raises_product_added(self):
        product = Product.create(name="Beaded Clutch", price=1200, category="bags", stock_quantity=3)

        assert len(product._events) == 1
        event = product._events[0]
        assert isinstance(event, ProductAdded)
        assert event.product_id == str(product.id)
        assert event.stock_quantity == 3

    @pytest.mark.parametrize("missing", ["name", "price", "category"])
    def test_required_fields(self, missing):
        fields = {"name": "Beaded Clutch", "price": 1200, "category": "bags"}
        fields[missing] = None

        with pytest.raises(ValidationError) as exc:
            Product.create(**fields)

        assert missing in exc.value.messages

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            Product.create(name="Beaded Clutch", price=-1, category="bags")


class TestUpdateDetails:
    def test_replaces_editable_fields(self):
        product = Product.create(name="Old", price=100, category="bags", sizes=["S"], is_featured=True)
        product._events.clear()

        product.update_details(name="New", price=250, category="shoes", stock_quantity=4)

        assert product.name == "New"
        assert product.price == 250
        assert product.category == "shoes"
        assert product.stock_quantity == 4
        assert product.is_featured is False
        assert load_labels(product.sizes) == []
        assert isinstance(product._events[0], ProductDetailsUpdated)


class TestDecrementStock:
    def test_reduces_stock(self):
        product = Product.create(name="Dress", price=5000, category="dresses", stock_quantity=10)
        product._events.clear()

        shortfall = product.decrement_stock(3, order_id="ord-1")

        assert shortfall == 0
        assert product.stock_quantity == 7
        event = product._events[0]
        assert isinstance(event, StockDecremented)
        assert event.previous_stock == 10
        assert event.new_stock == 7
        assert event.order_id == "ord-1"

    def test_floors_at_zero_and_reports_shortfall(self):
        product = Product.create(name="Dress", price=5000, category="dresses", stock_quantity=2)

        shortfall = product.decrement_stock(5)

        assert product.stock_quantity == 0
        assert shortfall == 3

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_quantity_must_be_positive(self, quantity):
        product = Product.create(name="Dress", price=5000, category="dresses", stock_quantity=2)

        with pytest.raises(ValidationError):
            product.decrement_stock(quantity)


class TestLabelHelpers:
    def test_dump_labels_accepts_json_text(self):
        assert json.loads(dump_labels('["S", "M"]')) == ["S", "M"]

    def test_dump_labels_none(self):
        assert dump_labels(None) is None

    def test_load_labels_empty(self):
        assert load_labels(None) == []
        assert load_labels("") == []
