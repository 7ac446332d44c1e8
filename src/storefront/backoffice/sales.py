"""Sales aggregations shared by the dashboard and analytics views."""

from collections import defaultdict


def revenue(orders) -> float:
    return sum(o.total_amount or 0 for o in orders)


def product_sales(orders) -> list[dict]:
    """Units sold and revenue per product, best sellers first."""
    sales = {}
    for order in orders:
        for item in order.items:
            key = str(item.product_id)
            entry = sales.setdefault(key, {"productId": key, "name": item.product_name, "sales": 0, "revenue": 0.0})
            entry["sales"] += item.quantity
            entry["revenue"] += item.price * item.quantity
    return sorted(sales.values(), key=lambda e: e["sales"], reverse=True)


def monthly_revenue(orders) -> list[dict]:
    months = defaultdict(lambda: {"revenue": 0.0, "orders": 0})
    for order in orders:
        if not order.created_at:
            continue
        month = order.created_at.strftime("%Y-%m")
        months[month]["revenue"] += order.total_amount or 0
        months[month]["orders"] += 1
    return [{"month": month, **totals} for month, totals in sorted(months.items())]
