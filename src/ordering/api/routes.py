"""FastAPI routes for the Ordering domain — orders and products.

Thin adapters that translate HTTP requests into domain commands and
queries. Domain validation and not-found errors are mapped to 400/404 by
Protean's FastAPI exception handlers.
"""

import json

import structlog
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from ordering.api.schemas import (
    CreateOrderRequest,
    MarkPaidRequest,
    ProductRequest,
    ProductUpdateRequest,
    StatusResponse,
    UpdateStatusRequest,
)
from ordering.order.creation import PlaceOrder
from ordering.order.fulfillment import MarkOrderDelivered, UpdateOrderStatus
from ordering.order.order import Order
from ordering.order.payment import MarkOrderPaid
from ordering.order.queries import get_order_by_id, list_orders, order_to_dict, summarize_orders
from ordering.product.management import AddProduct, RemoveProduct, UpdateProduct
from ordering.product.product import Product

logger = structlog.get_logger(__name__)


def _order_response(order_id: str, status_code: int = 200) -> JSONResponse:
    order = current_domain.repository_for(Order).get(order_id)
    return JSONResponse(status_code=status_code, content=order_to_dict(order))


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201)
async def create_order(body: CreateOrderRequest) -> JSONResponse:
    command = PlaceOrder(
        order_items=json.dumps([item.model_dump() for item in body.order_items]),
        customer_details=json.dumps(body.customer_details.model_dump()),
        items_price=body.items_price,
        tax_price=body.tax_price,
        shipping_price=body.shipping_price,
        total_price=body.total_price,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return _order_response(order_id, status_code=201)


@order_router.get("")
async def get_orders() -> JSONResponse:
    return JSONResponse(content=list_orders())


@order_router.get("/summary")
async def get_order_summary() -> JSONResponse:
    return JSONResponse(content=summarize_orders(list_orders()))


@order_router.get("/{order_id}")
async def get_order(order_id: str) -> JSONResponse:
    return JSONResponse(content=get_order_by_id(order_id))


@order_router.put("/{order_id}/pay")
async def mark_order_paid(order_id: str, body: MarkPaidRequest) -> JSONResponse:
    command = MarkOrderPaid(
        order_id=order_id,
        payment_id=body.id,
        payment_status=body.status,
        update_time=body.update_time,
        payer_email=body.payer.email_address,
    )
    current_domain.process(command, asynchronous=False)
    return _order_response(order_id)


@order_router.put("/{order_id}/deliver")
async def mark_order_delivered(order_id: str) -> JSONResponse:
    command = MarkOrderDelivered(order_id=order_id)
    current_domain.process(command, asynchronous=False)
    return _order_response(order_id)


@order_router.put("/{order_id}/status")
async def update_order_status(order_id: str, body: UpdateStatusRequest) -> JSONResponse:
    command = UpdateOrderStatus(order_id=order_id, status=body.status)
    current_domain.process(command, asynchronous=False)
    return _order_response(order_id)


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


def _product_to_dict(product: Product) -> dict:
    return {
        "id": str(product.id),
        "name": product.name,
        "description": product.description,
        "price": product.price,
        "images": product.image_urls,
        "category": product.category,
        "countInStock": product.count_in_stock,
    }


@product_router.get("")
async def get_products() -> JSONResponse:
    repo = current_domain.repository_for(Product)
    products = repo._dao.query.order_by("created_at").all().items
    return JSONResponse(content=[_product_to_dict(p) for p in products])


@product_router.get("/{product_id}")
async def get_product(product_id: str) -> JSONResponse:
    product = current_domain.repository_for(Product).get(product_id)
    return JSONResponse(content=_product_to_dict(product))


@product_router.post("", status_code=201)
async def add_product(body: ProductRequest) -> JSONResponse:
    command = AddProduct(
        name=body.name,
        description=body.description,
        price=body.price,
        images=json.dumps(body.images),
        category=body.category,
        count_in_stock=body.count_in_stock,
    )
    product_id = current_domain.process(command, asynchronous=False)
    product = current_domain.repository_for(Product).get(product_id)
    return JSONResponse(status_code=201, content=_product_to_dict(product))


@product_router.put("/{product_id}")
async def update_product(product_id: str, body: ProductUpdateRequest) -> JSONResponse:
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        images=json.dumps(body.images) if body.images is not None else None,
        category=body.category,
        count_in_stock=body.count_in_stock,
    )
    current_domain.process(command, asynchronous=False)
    product = current_domain.repository_for(Product).get(product_id)
    return JSONResponse(content=_product_to_dict(product))


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def remove_product(product_id: str) -> StatusResponse:
    current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------
def register_storage_error_handler(app: FastAPI) -> None:
    """Answer unexpected failures with a generic 500 that leaks no internals."""

    @app.exception_handler(Exception)
    async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled storage failure",
            path=request.url.path,
            error=str(exc),
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"message": "Internal server error"})
