"""Read queries over orders for the confirmation page and the back-office."""

from storefront.domain import storefront
from storefront.ordering.order import Order

_BATCH_SIZE = 100


@storefront.repository(part_of=Order)
class OrderRepository:
    def all_orders(self) -> list[Order]:
        """Every order, newest first."""
        orders = []
        offset = 0
        while True:
            results = self._dao.query.order_by("-created_at").offset(offset).limit(_BATCH_SIZE).all()
            orders.extend(results.items)
            offset += _BATCH_SIZE
            if offset >= results.total:
                return orders

    def recent(self, limit: int = 5) -> list[Order]:
        return self._dao.query.order_by("-created_at").limit(limit).all().items

    def search(self, status: str | None = None, term: str | None = None) -> list[Order]:
        """Orders matching a status and a free-text term, newest first.

        ``status`` of ``all`` (or empty) means any status. ``term`` matches
        customer name, email or order id, case-insensitively.
        """
        orders = self.all_orders()

        if status and status.lower() != "all":
            wanted = status.lower()
            orders = [o for o in orders if (o.status or "").lower() == wanted]

        if term:
            needle = term.lower()
            orders = [
                o
                for o in orders
                if needle in (o.customer_name or "").lower()
                or needle in (o.customer_email or "").lower()
                or needle in str(o.id).lower()
            ]

        return orders
