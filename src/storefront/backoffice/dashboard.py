"""Admin dashboard summary."""

from protean.utils.globals import current_domain

from storefront.backoffice.sales import product_sales, revenue
from storefront.catalogue.product import Product
from storefront.ordering.order import Order


def order_summary(order: Order) -> dict:
    return {
        "id": str(order.id),
        "customer_name": order.customer_name,
        "customer_email": order.customer_email,
        "total_amount": order.total_amount,
        "status": order.status,
        "created_at": order.created_at.isoformat() if order.created_at else None,
    }


def build_dashboard() -> dict:
    orders = current_domain.repository_for(Order).all_orders()
    products = current_domain.repository_for(Product).all_products()

    return {
        "stats": {
            "totalProducts": len(products),
            "totalOrders": len(orders),
            "totalCustomers": len({o.customer_name for o in orders}),
            "revenue": revenue(orders),
        },
        "recentOrders": [order_summary(o) for o in orders[:5]],
        "topProducts": product_sales(orders)[:3],
    }
