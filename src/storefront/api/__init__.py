"""Storefront API package."""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from storefront.api.routes import admin_router, order_router, product_router, shipping_router
from storefront.ordering.placement import OrderPersistenceError

logger = structlog.get_logger(__name__)

__all__ = ["product_router", "order_router", "shipping_router", "admin_router", "register_error_handlers"]


def register_error_handlers(app: FastAPI) -> None:
    """Map domain errors to HTTP responses.

    Validation and not-found errors use Protean's handlers (400 and 404).
    """
    register_exception_handlers(app)

    @app.exception_handler(OrderPersistenceError)
    async def order_persistence_error_handler(request: Request, exc: OrderPersistenceError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled error", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
