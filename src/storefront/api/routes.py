"""FastAPI routes for the storefront: shop, checkout, shipping and back-office."""

import json
import math

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from storefront.api.schemas import (
    LoginRequest,
    LoginResponse,
    OrderDetailEnvelope,
    OrderDetailResponse,
    OrderEnvelope,
    OrderItemResponse,
    OrderListResponse,
    OrderResponse,
    PaginationSchema,
    PlaceOrderRequest,
    ProductDetailResponse,
    ProductEnvelope,
    ProductListResponse,
    ProductRequest,
    ProductResponse,
    ShippingOptionResponse,
    ShippingOptionsResponse,
    StatusResponse,
    UpdateOrderStatusRequest,
)
from storefront.backoffice.analytics import build_analytics
from storefront.backoffice.auth import verify_admin_password
from storefront.backoffice.dashboard import build_dashboard
from storefront.catalogue.management import AddProduct, RemoveProduct, UpdateProduct
from storefront.catalogue.product import Product, load_labels
from storefront.ordering.order import Order
from storefront.ordering.placement import PlaceOrder
from storefront.ordering.status import UpdateOrderStatus
from storefront.shipping.rates import all_options


# ---------------------------------------------------------------------------
# Response builders
# ---------------------------------------------------------------------------
def _product_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        description=product.description,
        price=product.price,
        image_url=product.image_url,
        image_urls=load_labels(product.image_urls),
        category=product.category,
        stock_quantity=product.stock_quantity or 0,
        is_featured=bool(product.is_featured),
        sizes=load_labels(product.sizes),
        colors=load_labels(product.colors),
        designs=load_labels(product.designs),
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


def _pagination(page: int, limit: int, total: int) -> PaginationSchema:
    total_pages = math.ceil(total / limit) if limit else 0
    return PaginationSchema(
        page=page,
        limit=limit,
        total=total,
        totalPages=total_pages,
        hasNext=page < total_pages,
        hasPrev=page > 1,
    )


def _order_fields(order: Order) -> dict:
    return {
        "id": str(order.id),
        "customer_name": order.customer_name,
        "customer_email": order.customer_email,
        "customer_phone": order.customer_phone,
        "customer_address": order.customer_address,
        "shipping_location": order.shipping_location,
        "shipping_fee": order.shipping_fee,
        "total_amount": order.total_amount,
        "status": order.status,
        "created_at": order.created_at,
        "updated_at": order.updated_at,
    }


def _order_detail(order: Order) -> OrderDetailResponse:
    return OrderDetailResponse(
        **_order_fields(order),
        items=[
            OrderItemResponse(
                id=str(item.id),
                product_id=str(item.product_id),
                product_name=item.product_name,
                quantity=item.quantity,
                price=item.price,
                selected_variants=json.loads(item.selected_variants) if item.selected_variants else {},
            )
            for item in order.items
        ],
    )


def _product_command_fields(body: ProductRequest) -> dict:
    return {
        "name": body.name,
        "description": body.description,
        "price": body.price,
        "image_url": body.image_url,
        "image_urls": json.dumps(body.image_urls or []),
        "category": body.category,
        "stock_quantity": body.stock_quantity or 0,
        "is_featured": body.is_featured,
        "sizes": json.dumps(body.sizes or []),
        "colors": json.dumps(body.colors or []),
        "designs": json.dumps(body.designs or []),
    }


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("", response_model=ProductListResponse)
async def list_products(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=8, ge=1, le=100),
    category: str | None = None,
    featured: bool = False,
) -> ProductListResponse:
    repo = current_domain.repository_for(Product)
    products, total = repo.page(page=page, limit=limit, category=category, featured=featured)
    return ProductListResponse(
        products=[_product_response(p) for p in products],
        pagination=_pagination(page, limit, total),
    )


@product_router.get("/{product_id}", response_model=ProductDetailResponse)
async def get_product(product_id: str) -> ProductDetailResponse:
    """A product and up to four others from the same category."""
    repo = current_domain.repository_for(Product)
    product = repo.get(product_id)
    return ProductDetailResponse(
        product=_product_response(product),
        relatedProducts=[_product_response(p) for p in repo.related_to(product)],
    )


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderEnvelope)
async def place_order(body: PlaceOrderRequest) -> OrderEnvelope:
    command = PlaceOrder(
        customer_name=body.customer_name,
        customer_email=body.customer_email,
        customer_phone=body.customer_phone,
        customer_address=body.customer_address,
        shipping_location=body.shipping_location,
        shipping_fee=body.shipping_fee,
        total_amount=body.total_amount,
        items=json.dumps([line.model_dump() for line in body.items]) if body.items else None,
    )
    order_id = current_domain.process(command, asynchronous=False)
    order = current_domain.repository_for(Order).get(order_id)
    return OrderEnvelope(order=OrderResponse(**_order_fields(order)))


@order_router.get("/{order_id}", response_model=OrderDetailEnvelope)
async def get_order(order_id: str) -> OrderDetailEnvelope:
    order = current_domain.repository_for(Order).get(order_id)
    return OrderDetailEnvelope(order=_order_detail(order))


# ---------------------------------------------------------------------------
# Shipping Router
# ---------------------------------------------------------------------------
shipping_router = APIRouter(prefix="/shipping-options", tags=["shipping"])


@shipping_router.get("", response_model=ShippingOptionsResponse)
async def list_shipping_options() -> ShippingOptionsResponse:
    return ShippingOptionsResponse(
        shippingOptions=[ShippingOptionResponse(**option.to_dict()) for option in all_options()]
    )


# ---------------------------------------------------------------------------
# Admin Router
# ---------------------------------------------------------------------------
admin_router = APIRouter(prefix="/admin", tags=["admin"])


@admin_router.post("/login", response_model=LoginResponse)
async def admin_login(body: LoginRequest):
    if not body.password:
        return JSONResponse(status_code=400, content={"error": "Password is required"})
    if not verify_admin_password(body.password):
        return JSONResponse(status_code=401, content={"error": "Invalid password"})
    return LoginResponse(success=True, message="Login successful")


@admin_router.post("/products", status_code=201, response_model=ProductEnvelope)
async def add_product(body: ProductRequest) -> ProductEnvelope:
    command = AddProduct(**_product_command_fields(body))
    product_id = current_domain.process(command, asynchronous=False)
    product = current_domain.repository_for(Product).get(product_id)
    return ProductEnvelope(product=_product_response(product))


@admin_router.get("/products", response_model=ProductListResponse)
async def list_admin_products(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
) -> ProductListResponse:
    repo = current_domain.repository_for(Product)
    products, total = repo.page(page=page, limit=limit)
    return ProductListResponse(
        products=[_product_response(p) for p in products],
        pagination=_pagination(page, limit, total),
    )


@admin_router.put("/products/{product_id}", response_model=ProductEnvelope)
async def update_product(product_id: str, body: ProductRequest) -> ProductEnvelope:
    command = UpdateProduct(product_id=product_id, **_product_command_fields(body))
    current_domain.process(command, asynchronous=False)
    product = current_domain.repository_for(Product).get(product_id)
    return ProductEnvelope(product=_product_response(product))


@admin_router.delete("/products/{product_id}", response_model=StatusResponse)
async def remove_product(product_id: str) -> StatusResponse:
    current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()


@admin_router.get("/orders", response_model=OrderListResponse)
async def list_admin_orders(status: str | None = None, search: str | None = None) -> OrderListResponse:
    orders = current_domain.repository_for(Order).search(status=status, term=search)
    return OrderListResponse(orders=[_order_detail(o) for o in orders])


@admin_router.put("/orders/{order_id}/status", response_model=StatusResponse)
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest) -> StatusResponse:
    command = UpdateOrderStatus(order_id=order_id, status=body.status)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@admin_router.get("/dashboard")
async def admin_dashboard() -> dict:
    return build_dashboard()


@admin_router.get("/analytics")
async def admin_analytics() -> dict:
    return build_analytics()
