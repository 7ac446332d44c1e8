"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A new product was added to the catalogue from the back-office."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    category = String(required=True)
    price = Float(required=True)
    stock_quantity = Integer(required=True)
    created_at = DateTime(required=True)


@storefront.event(part_of="Product")
class ProductDetailsUpdated:
    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    category = String(required=True)
    price = Float(required=True)
    stock_quantity = Integer(required=True)
    updated_at = DateTime(required=True)


@storefront.event(part_of="Product")
class StockDecremented:
    """Units were taken out of stock by a placed order."""

    __version__ = 1

    product_id = Identifier(required=True)
    order_id = Identifier()
    quantity = Integer(required=True)
    previous_stock = Integer(required=True)
    new_stock = Integer(required=True)
    decremented_at = DateTime(required=True)
