import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from storefront.api import admin_router, order_router, product_router, register_error_handlers, shipping_router


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(product_router)
    app.include_router(order_router)
    app.include_router(shipping_router)
    app.include_router(admin_router)
    register_error_handlers(app)
    return TestClient(app)
