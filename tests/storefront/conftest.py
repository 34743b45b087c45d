from datetime import UTC, datetime

import pytest
from ordering.order.views import OrderView

PLACED_AT = datetime(2025, 11, 8, 9, 30, tzinfo=UTC)
UPDATED_AT = datetime(2025, 11, 9, 14, 5, tzinfo=UTC)


@pytest.fixture()
def make_order():
    """Factory for order views as the API would return them."""

    def _make(status="Processing", tracking_number=None, **overrides):
        payload = {
            "orderId": "ORD-2025-9012GHI",
            "status": status,
            "totalAmount": 199.98,
            "orderDate": PLACED_AT.isoformat(),
            "statusUpdatedAt": UPDATED_AT.isoformat(),
            "estimatedDelivery": datetime(2025, 11, 15, 9, 30, tzinfo=UTC).isoformat(),
            "trackingNumber": tracking_number,
            "shippingAddress": {
                "name": "John Doe",
                "street": "123 Main Street",
                "city": "New York",
                "state": "NY",
                "zipCode": "10001",
            },
            "items": [
                {"productId": "SKU-004", "name": "Urban Street Classic", "size": 10, "price": 99.99, "quantity": 2},
            ],
        }
        payload.update(overrides)
        return OrderView.model_validate(payload)

    return _make


@pytest.fixture()
def order(make_order):
    return make_order()
