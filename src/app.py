"""Storefront FastAPI application.

Processes commands synchronously via HTTP inside the ordering domain
context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay: the default runs on the memory
# provider, "production" on PostgreSQL. Events are processed synchronously in
# both, so order notifications are sent right after the order commits.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from ordering.domain import ordering
from ordering.utils.logging import configure_logging
from protean.integrations.fastapi import register_exception_handlers

configure_logging()
ordering.init()

_DOMAIN_ROUTE_PREFIXES = ("/orders", "/products")

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="Cart checkout, orders and their fulfillment lifecycle",
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
    """Push the ordering domain context for domain routes."""
    if request.url.path.startswith(_DOMAIN_ROUTE_PREFIXES):
        with ordering.domain_context():
            response = await call_next(request)
        return response
    # Health check, docs and uploads need no domain
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from assets.api.routes import upload_router  # noqa: E402
from ordering.api.routes import order_router, product_router, register_storage_error_handler  # noqa: E402

app.include_router(order_router)
app.include_router(product_router)
app.include_router(upload_router)
register_exception_handlers(app)
register_storage_error_handler(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "ordering": {"name": ordering.name},
            },
        }
    )
