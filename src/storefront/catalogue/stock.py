"""Catalogue reacts to placed orders by taking the ordered units out of stock.

Quantities are summed per product and every product is handled on its own:
a missing product or a failed write is logged and the rest still go through.
The order itself is never rolled back from here.
"""

import json
from collections import defaultdict

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.ordering.events import OrderPlaced

logger = structlog.get_logger(__name__)


def quantities_by_product(items) -> dict[str, int]:
    totals = defaultdict(int)
    for item in items:
        totals[str(item["product_id"])] += int(item["quantity"])
    return dict(totals)


@storefront.event_handler(part_of=Product, stream_category="storefront::order")
class OrderStockEventHandler:
    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        items = json.loads(event.items) if isinstance(event.items, str) else event.items
        repo = current_domain.repository_for(Product)

        for product_id, quantity in quantities_by_product(items).items():
            try:
                product = repo.get(product_id)
                shortfall = product.decrement_stock(quantity, order_id=event.order_id)
                repo.add(product)
            except ObjectNotFoundError:
                logger.warning(
                    "Ordered product not found, stock left unchanged",
                    product_id=product_id,
                    order_id=str(event.order_id),
                )
                continue
            except Exception as e:
                logger.error(
                    "Failed to decrement stock",
                    product_id=product_id,
                    order_id=str(event.order_id),
                    error=str(e),
                )
                continue

            if shortfall:
                logger.warning(
                    "Product oversold, stock floored at zero",
                    product_id=product_id,
                    order_id=str(event.order_id),
                    shortfall=shortfall,
                )
            else:
                logger.info(
                    "Stock decremented",
                    product_id=product_id,
                    order_id=str(event.order_id),
                    quantity=quantity,
                    remaining=product.stock_quantity,
                )
