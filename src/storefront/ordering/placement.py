"""Order placement: checkout request to a stored pending order.

The shipping fee sent by the client is checked against the shipping table
before anything is written. Stock is decremented afterwards by the catalogue
in reaction to ``OrderPlaced``.
"""

import json

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.ordering.order import Order
from storefront.shipping.rates import option_for

logger = structlog.get_logger(__name__)


class OrderPersistenceError(Exception):
    """The order could not be written to the data store."""


@storefront.command(part_of="Order")
class PlaceOrder:
    customer_name = String(required=True, max_length=255)
    customer_email = String(required=True, max_length=254)
    customer_phone = String(required=True, max_length=50)
    customer_address = Text(required=True)
    shipping_location = String(required=True, max_length=50)
    shipping_fee = Float(default=0.0)
    total_amount = Float(required=True)
    items = Text(required=True)  # JSON: list of cart line dicts


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        items_data = json.loads(command.items) if isinstance(command.items, str) else command.items
        if not items_data:
            raise ValidationError({"items": ["Order must contain at least one item"]})
        if command.total_amount <= 0:
            raise ValidationError({"total_amount": ["Total amount must be greater than zero"]})

        option = option_for(command.shipping_location)
        if option is None:
            raise ValidationError({"shipping_location": [f"Unknown shipping location '{command.shipping_location}'"]})

        client_fee = command.shipping_fee or 0.0
        if round(client_fee, 2) != round(option.fee, 2):
            logger.warning(
                "Rejected order with tampered shipping fee",
                shipping_location=option.id,
                client_fee=client_fee,
                expected_fee=option.fee,
            )
            raise ValidationError({"shipping_fee": ["Invalid shipping fee"]})

        order = Order.place(
            customer_name=command.customer_name,
            customer_email=command.customer_email,
            customer_phone=command.customer_phone,
            customer_address=command.customer_address,
            shipping_location=option.id,
            shipping_fee=option.fee,
            total_amount=command.total_amount,
            items_data=items_data,
        )

        try:
            current_domain.repository_for(Order).add(order)
        except Exception as e:
            logger.error("Failed to store order", order_id=str(order.id), error=str(e))
            raise OrderPersistenceError("Failed to create order") from e

        logger.info(
            "Order placed",
            order_id=str(order.id),
            items=len(order.items),
            total_amount=order.total_amount,
        )
        return str(order.id)
