"""Admin analytics: revenue over time, best sellers and category mix."""

from collections import Counter

from protean.utils.globals import current_domain

from storefront.backoffice.sales import monthly_revenue, product_sales, revenue
from storefront.catalogue.product import Product
from storefront.ordering.order import Order


def build_analytics() -> dict:
    orders = current_domain.repository_for(Order).all_orders()
    products = current_domain.repository_for(Product).all_products()
    categories = Counter(p.category for p in products)

    return {
        "totalRevenue": revenue(orders),
        "totalOrders": len(orders),
        "totalProducts": len(products),
        "totalCustomers": len({(o.customer_email or "").lower() for o in orders}),
        "revenueByMonth": monthly_revenue(orders),
        "topProducts": product_sales(orders)[:5],
        "categoryBreakdown": [{"category": c, "count": n} for c, n in sorted(categories.items())],
    }
