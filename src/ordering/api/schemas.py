"""Pydantic request/response schemas for the Ordering API.

These are external contracts, separate from the internal protean commands.
Bodies are camelCase on the wire; snake_case names are accepted too.
"""

from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from ordering.order.views import OrderView

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class OrderItemRequest(BaseModel):
    model_config = _CAMEL

    product_id: str | None = None
    id: str | None = None
    name: str = Field(min_length=1, max_length=255)
    size: int
    price: float = Field(ge=0)
    quantity: int = Field(ge=1)


class ShippingAddressRequest(BaseModel):
    model_config = _CAMEL

    # Optional so that gaps surface as the domain's address message
    name: str | None = None
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None


class CreateOrderRequest(BaseModel):
    model_config = {
        **_CAMEL,
        "json_schema_extra": {
            "examples": [
                {
                    "items": [
                        {
                            "productId": "SKU-001",
                            "name": "Runner X2000",
                            "size": 10,
                            "price": 129.99,
                            "quantity": 2,
                        }
                    ],
                    "shippingAddress": {
                        "name": "John Doe",
                        "street": "123 Main St",
                        "city": "Portland",
                        "state": "OR",
                        "zipCode": "97201",
                    },
                    "totalAmount": 259.98,
                }
            ]
        },
    }

    items: list[OrderItemRequest] = []
    shipping_address: ShippingAddressRequest | None = None
    total_amount: float | None = None


class UpdateStatusRequest(BaseModel):
    model_config = _CAMEL

    status: str | None = None
    tracking_number: str | None = Field(None, max_length=50)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class OrderListResponse(BaseModel):
    orders: list[OrderView]


class OrderDetailResponse(BaseModel):
    order: OrderView


class OrderPlacedResponse(BaseModel):
    model_config = _CAMEL

    message: str
    order_id: str
    status: str
    estimated_delivery: datetime


class OrderStatusResponse(BaseModel):
    model_config = _CAMEL

    message: str
    order_id: str
    status: str
    tracking_number: str | None = None
