"""Thee Girlies Hub FastAPI application.

Serves the shop, checkout and back-office endpoints. Commands are processed
synchronously within the request.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay is applied:
#   - default/"test" → event_processing = "sync"  (stock handler fires in UoW)
#   - "production"   → event_processing = "async" (stock handler fires via Engine)
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from storefront.domain import storefront
from storefront.utils.logging import bind_request_context, clear_context

storefront.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Thee Girlies Hub API",
    description="Storefront: catalogue, checkout and back-office",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the storefront domain context and a per-request log context."""
    request_id = request.headers.get("X-Request-ID") or uuid4().hex
    bind_request_context(request_id=request_id, method=request.method, path=request.url.path)
    try:
        with storefront.domain_context():
            response = await call_next(request)
    finally:
        clear_context()
    response.headers["X-Request-ID"] = request_id
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from storefront.api import (  # noqa: E402
    admin_router,
    order_router,
    product_router,
    register_error_handlers,
    shipping_router,
)

app.include_router(product_router)
app.include_router(order_router)
app.include_router(shipping_router)
app.include_router(admin_router)
register_error_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {"storefront": {"name": storefront.name}},
        }
    )
