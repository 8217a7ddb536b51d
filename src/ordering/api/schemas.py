"""Pydantic request schemas for the Ordering API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands. Field aliases follow the public camelCase shape.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class CustomerDetailsSchema(BaseModel):
    name: str
    email: str
    address: str
    phone: str


class OrderItemSchema(BaseModel):
    product: str
    name: str
    qty: int = Field(ge=1)
    price: float = Field(ge=0)
    image: str


class PayerSchema(BaseModel):
    email_address: str | None = None


# ---------------------------------------------------------------------------
# Order Request Schemas
# ---------------------------------------------------------------------------
class CreateOrderRequest(BaseModel):
    order_items: list[OrderItemSchema] = Field(alias="orderItems")
    customer_details: CustomerDetailsSchema = Field(alias="customerDetails")
    items_price: float = Field(alias="itemsPrice")
    tax_price: float = Field(default=0.0, alias="taxPrice")
    shipping_price: float = Field(default=0.0, alias="shippingPrice")
    total_price: float = Field(alias="totalPrice")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "orderItems": [
                        {
                            "product": "prod-001",
                            "name": "Home Jersey 2024",
                            "qty": 2,
                            "price": 45.0,
                            "image": "https://cdn.example.com/home-jersey.jpg",
                        }
                    ],
                    "customerDetails": {
                        "name": "Sam Doe",
                        "email": "sam@example.com",
                        "address": "12 Harbour Road, Springfield",
                        "phone": "+1 555 0100",
                    },
                    "itemsPrice": 90.0,
                    "taxPrice": 0.0,
                    "shippingPrice": 10.0,
                    "totalPrice": 100.0,
                }
            ]
        },
    }


class MarkPaidRequest(BaseModel):
    id: str | None = None
    status: str | None = None
    update_time: str | None = None
    payer: PayerSchema = Field(default_factory=PayerSchema)


class UpdateStatusRequest(BaseModel):
    status: str


# ---------------------------------------------------------------------------
# Product Request Schemas
# ---------------------------------------------------------------------------
class ProductRequest(BaseModel):
    name: str
    description: str | None = None
    price: float = Field(ge=0)
    images: list[str] = Field(default_factory=list)
    category: str | None = None
    count_in_stock: int = Field(default=0, ge=0, alias="countInStock")

    model_config = {"populate_by_name": True}


class ProductUpdateRequest(BaseModel):
    name: str | None = None
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    images: list[str] | None = None
    category: str | None = None
    count_in_stock: int | None = Field(default=None, ge=0, alias="countInStock")

    model_config = {"populate_by_name": True}


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"
