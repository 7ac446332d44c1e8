"""Pydantic request/response schemas for the storefront API.

These are external contracts, kept separate from the Protean commands.
Request fields are optional where the domain reports missing values itself,
so a half-filled checkout form gets a 400 rather than a 422.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    success: bool = True


class PaginationSchema(BaseModel):
    page: int
    limit: int
    total: int
    totalPages: int  # noqa: N815
    hasNext: bool  # noqa: N815
    hasPrev: bool  # noqa: N815


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------
class ProductRequest(BaseModel):
    name: str | None = None
    description: str | None = None
    price: float | None = None
    image_url: str | None = None
    image_urls: list[str] | None = None
    category: str | None = None
    stock_quantity: int | None = Field(default=0, ge=0)
    is_featured: bool = False
    sizes: list[str] | None = None
    colors: list[str] | None = None
    designs: list[str] | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Satin Wrap Dress",
                    "price": 18500,
                    "category": "dresses",
                    "stock_quantity": 12,
                    "sizes": ["S", "M", "L"],
                    "colors": ["Wine", "Emerald"],
                }
            ]
        }
    }


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    price: float
    image_url: str | None = None
    image_urls: list[str] = []
    category: str
    stock_quantity: int = 0
    is_featured: bool = False
    sizes: list[str] = []
    colors: list[str] = []
    designs: list[str] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProductEnvelope(BaseModel):
    product: ProductResponse


class ProductListResponse(BaseModel):
    products: list[ProductResponse]
    pagination: PaginationSchema


class ProductDetailResponse(BaseModel):
    product: ProductResponse
    relatedProducts: list[ProductResponse]  # noqa: N815


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class OrderLineSchema(BaseModel):
    product_id: str | None = None
    product_name: str | None = None
    quantity: int | None = None
    price: float | None = None
    selected_variants: dict[str, str] | None = None


class PlaceOrderRequest(BaseModel):
    customer_name: str | None = None
    customer_email: str | None = None
    customer_phone: str | None = None
    customer_address: str | None = None
    shipping_location: str | None = None
    shipping_fee: float | None = None
    total_amount: float | None = None
    items: list[OrderLineSchema] | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_name": "Ada Obi",
                    "customer_email": "ada@example.com",
                    "customer_phone": "08030000000",
                    "customer_address": "12 Allen Avenue, Ikeja",
                    "shipping_location": "lagos-mainland",
                    "shipping_fee": 3500,
                    "total_amount": 19700,
                    "items": [
                        {
                            "product_id": "prod-001",
                            "product_name": "Satin Wrap Dress",
                            "quantity": 1,
                            "price": 16200,
                            "selected_variants": {"size": "M"},
                        }
                    ],
                }
            ]
        }
    }


class OrderItemResponse(BaseModel):
    id: str
    product_id: str
    product_name: str | None = None
    quantity: int
    price: float
    selected_variants: dict[str, str] = {}


class OrderResponse(BaseModel):
    id: str
    customer_name: str
    customer_email: str
    customer_phone: str
    customer_address: str
    shipping_location: str
    shipping_fee: float
    total_amount: float
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OrderDetailResponse(OrderResponse):
    items: list[OrderItemResponse] = []


class OrderEnvelope(BaseModel):
    order: OrderResponse


class OrderDetailEnvelope(BaseModel):
    order: OrderDetailResponse


class OrderListResponse(BaseModel):
    orders: list[OrderDetailResponse]


class UpdateOrderStatusRequest(BaseModel):
    status: str | None = None


# ---------------------------------------------------------------------------
# Shipping
# ---------------------------------------------------------------------------
class ShippingOptionResponse(BaseModel):
    id: str
    name: str
    description: str
    areas: str
    deliveryTime: str  # noqa: N815
    fee: float


class ShippingOptionsResponse(BaseModel):
    shippingOptions: list[ShippingOptionResponse]  # noqa: N815


# ---------------------------------------------------------------------------
# Back-office
# ---------------------------------------------------------------------------
class LoginRequest(BaseModel):
    password: str | None = None


class LoginResponse(BaseModel):
    success: bool
    message: str | None = None
