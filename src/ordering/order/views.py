"""Read models handed out by the order query paths.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


class AddressView(BaseModel):
    model_config = _CAMEL

    name: str
    street: str
    city: str
    state: str
    zip_code: str


class OrderItemView(BaseModel):
    model_config = _CAMEL

    product_id: str | None = None
    name: str
    size: int
    price: float
    quantity: int

    @property
    def line_total(self) -> float:
        return round(self.price * self.quantity, 2)


class OrderView(BaseModel):
    model_config = _CAMEL

    order_id: str
    status: str
    total_amount: float
    order_date: datetime
    status_updated_at: datetime
    estimated_delivery: datetime | None = None
    tracking_number: str | None = None
    shipping_address: AddressView
    items: list[OrderItemView] = []

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)
