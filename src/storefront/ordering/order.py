"""Order aggregate with its OrderItem lines.

An order is stored together with its lines in one write, so a header is never
visible without them. After placement admins move it through:

    pending -> processing -> shipped -> delivered
    pending | processing -> cancelled
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.ordering.events import OrderPlaced, OrderStatusChanged


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}


@storefront.entity(part_of="Order")
class OrderItem:
    """One purchased line, priced and named as it was at checkout."""

    product_id = Identifier(required=True)
    product_name = String(max_length=255)
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)
    selected_variants = Text()  # JSON: {"size": "M", ...}


@storefront.aggregate
class Order:
    customer_name = String(required=True, max_length=255)
    customer_email = String(required=True, max_length=254)
    customer_phone = String(required=True, max_length=50)
    customer_address = Text(required=True)
    shipping_location = String(required=True, max_length=50)
    shipping_fee = Float(default=0.0, min_value=0.0)
    total_amount = Float(required=True, min_value=0.0)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    items = HasMany(OrderItem)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def place(
        cls,
        customer_name,
        customer_email,
        customer_phone,
        customer_address,
        shipping_location,
        shipping_fee,
        total_amount,
        items_data,
    ):
        """Build a pending order and its lines from checkout data.

        Args:
            items_data: List of dicts with product_id, quantity, price and
                optionally product_name and selected_variants.
        """
        if not items_data:
            raise ValidationError({"items": ["Order must contain at least one item"]})

        now = datetime.now(UTC)
        order = cls(
            customer_name=customer_name,
            customer_email=customer_email,
            customer_phone=customer_phone,
            customer_address=customer_address,
            shipping_location=shipping_location,
            shipping_fee=shipping_fee,
            total_amount=total_amount,
            status=OrderStatus.PENDING.value,
            items=[
                OrderItem(
                    product_id=str(item.get("product_id") or ""),
                    product_name=item.get("product_name"),
                    quantity=item.get("quantity"),
                    price=item.get("price"),
                    selected_variants=json.dumps(item.get("selected_variants") or {}),
                )
                for item in items_data
            ],
            created_at=now,
            updated_at=now,
        )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_name=order.customer_name,
                customer_email=order.customer_email,
                shipping_location=order.shipping_location,
                shipping_fee=order.shipping_fee,
                total_amount=order.total_amount,
                items=json.dumps(
                    [
                        {"product_id": str(i.product_id), "quantity": i.quantity, "price": i.price}
                        for i in order.items
                    ]
                ),
                placed_at=now,
            )
        )
        return order

    def change_status(self, new_status):
        """Move the order to ``new_status`` if the lifecycle allows it."""
        try:
            target = OrderStatus(str(new_status).lower())
        except ValueError:
            raise ValidationError({"status": [f"Unknown order status '{new_status}'"]}) from None

        current = OrderStatus(self.status)
        if target not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target.value}"]})

        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=current.value,
                new_status=target.value,
                changed_at=now,
            )
        )
