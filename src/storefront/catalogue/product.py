"""Product aggregate: the sellable item shown in the shop and managed by admins.

Variant dimensions (sizes, colors, designs) and extra image URLs are free-text
label lists stored as JSON text.
"""

import json
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Integer, String, Text

from storefront.catalogue.events import ProductAdded, ProductDetailsUpdated, StockDecremented
from storefront.domain import storefront


def dump_labels(values) -> str | None:
    """Serialise a list of labels, dropping blanks."""
    if values is None:
        return None
    if isinstance(values, str):
        values = json.loads(values)
    return json.dumps([str(v) for v in values if v not in (None, "")])


def load_labels(raw) -> list[str]:
    if not raw:
        return []
    if isinstance(raw, list):
        return raw
    return json.loads(raw)


@storefront.aggregate
class Product:
    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    image_url = String(max_length=1000)
    image_urls = Text()  # JSON: list of URLs
    category = String(required=True, max_length=100)
    stock_quantity = Integer(default=0, min_value=0)
    is_featured = Boolean(default=False)
    sizes = Text()  # JSON: list of labels
    colors = Text()  # JSON: list of labels
    designs = Text()  # JSON: list of labels
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(
        cls,
        name,
        price,
        category,
        description=None,
        image_url=None,
        image_urls=None,
        stock_quantity=0,
        is_featured=False,
        sizes=None,
        colors=None,
        designs=None,
    ):
        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            price=price,
            image_url=image_url,
            image_urls=dump_labels(image_urls or []),
            category=category,
            stock_quantity=stock_quantity or 0,
            is_featured=bool(is_featured),
            sizes=dump_labels(sizes or []),
            colors=dump_labels(colors or []),
            designs=dump_labels(designs or []),
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                name=product.name,
                category=product.category,
                price=product.price,
                stock_quantity=product.stock_quantity,
                created_at=now,
            )
        )
        return product

    def update_details(
        self,
        name,
        price,
        category,
        description=None,
        image_url=None,
        image_urls=None,
        stock_quantity=0,
        is_featured=False,
        sizes=None,
        colors=None,
        designs=None,
    ):
        """Replace every editable field. Omitted variant lists become empty."""
        self.name = name
        self.price = price
        self.category = category
        self.description = description
        self.image_url = image_url
        self.image_urls = dump_labels(image_urls or [])
        self.stock_quantity = stock_quantity or 0
        self.is_featured = bool(is_featured)
        self.sizes = dump_labels(sizes or [])
        self.colors = dump_labels(colors or [])
        self.designs = dump_labels(designs or [])
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductDetailsUpdated(
                product_id=str(self.id),
                name=self.name,
                category=self.category,
                price=self.price,
                stock_quantity=self.stock_quantity,
                updated_at=self.updated_at,
            )
        )

    def decrement_stock(self, quantity, order_id=None):
        """Take ``quantity`` units out of stock, never going below zero.

        Returns the number of units that could not be covered by stock.
        """
        if quantity is None or quantity < 1:
            raise ValidationError({"quantity": ["Quantity to decrement must be at least 1"]})

        previous = self.stock_quantity or 0
        new_stock = max(previous - quantity, 0)
        self.stock_quantity = new_stock
        self.updated_at = datetime.now(UTC)

        self.raise_(
            StockDecremented(
                product_id=str(self.id),
                order_id=str(order_id) if order_id else None,
                quantity=quantity,
                previous_stock=previous,
                new_stock=new_stock,
                decremented_at=self.updated_at,
            )
        )
        return max(quantity - previous, 0)
