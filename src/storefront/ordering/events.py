"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A customer checked out and the order with its lines was stored.

    Consumed by the catalogue to take the ordered units out of stock.
    """

    __version__ = 1

    order_id = Identifier(required=True)
    customer_name = String(required=True)
    customer_email = String(required=True)
    shipping_location = String(required=True)
    shipping_fee = Float(required=True)
    total_amount = Float(required=True)
    items = Text(required=True)  # JSON: list of {product_id, quantity, price}
    placed_at = DateTime(required=True)


@storefront.event(part_of="Order")
class OrderStatusChanged:
    """An admin moved the order along its fulfilment lifecycle."""

    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)
