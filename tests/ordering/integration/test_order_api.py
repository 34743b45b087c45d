"""Integration tests for the order endpoints via TestClient."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from identity.user.tokens import issue_token
from ordering.api.routes import router
from ordering.order.order import Order
from protean import current_domain
from shared.api import register_error_handlers

ORDER_BODY = {
    "items": [
        {"productId": "SKU-001", "name": "Runner X2000", "size": 10, "price": 129.99, "quantity": 2},
    ],
    "shippingAddress": {
        "name": "John Doe",
        "street": "123 Main Street",
        "city": "New York",
        "state": "NY",
        "zipCode": "10001",
    },
    "totalAmount": 259.98,
}


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(router)
    register_error_handlers(app)
    return TestClient(app)


@pytest.fixture()
def auth(user_id):
    return {"Authorization": f"Bearer {issue_token(user_id, 'john.doe@example.com')}"}


@pytest.fixture()
def other_auth():
    return {"Authorization": f"Bearer {issue_token(str(uuid4()), 'jane.smith@example.com')}"}


def _create_order(client, auth, body=ORDER_BODY):
    response = client.post("/api/orders", json=body, headers=auth)
    assert response.status_code == 201
    return response.json()["orderId"]


class TestAuthRequired:
    @pytest.mark.parametrize(
        "method,path",
        [
            ("get", "/api/orders"),
            ("get", "/api/orders/history"),
            ("get", "/api/orders/ORD-1-ABCDEFGHI"),
            ("delete", "/api/orders/ORD-1-ABCDEFGHI"),
        ],
    )
    def test_missing_token(self, client, method, path):
        response = getattr(client, method)(path)
        assert response.status_code == 401
        assert response.json() == {"error": "Access token required"}

    def test_invalid_token(self, client):
        response = client.get("/api/orders", headers={"Authorization": "Bearer nonsense"})
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid or expired token"}

    def test_create_without_token(self, client):
        response = client.post("/api/orders", json=ORDER_BODY)
        assert response.status_code == 401


class TestCreateOrderEndpoint:
    def test_create_order(self, client, auth):
        response = client.post("/api/orders", json=ORDER_BODY, headers=auth)
        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Order placed successfully"
        assert data["status"] == "Processing"
        assert data["orderId"].startswith("ORD-")

        estimated = datetime.fromisoformat(data["estimatedDelivery"])
        order = current_domain.repository_for(Order).get(data["orderId"])
        assert abs((estimated - (order.order_date + timedelta(days=7))).total_seconds()) < 1

    def test_total_is_optional(self, client, auth):
        body = {key: value for key, value in ORDER_BODY.items() if key != "totalAmount"}
        order_id = _create_order(client, auth, body)
        assert current_domain.repository_for(Order).get(order_id).total_amount == 259.98

    def test_empty_items(self, client, auth):
        response = client.post("/api/orders", json={**ORDER_BODY, "items": []}, headers=auth)
        assert response.status_code == 400
        assert response.json()["error"] == "Order must contain at least one item"

    def test_incomplete_address(self, client, auth):
        address = {**ORDER_BODY["shippingAddress"], "zipCode": ""}
        response = client.post("/api/orders", json={**ORDER_BODY, "shippingAddress": address}, headers=auth)
        assert response.status_code == 400
        assert response.json()["error"] == "Complete shipping address is required"

    def test_missing_address(self, client, auth):
        body = {"items": ORDER_BODY["items"]}
        response = client.post("/api/orders", json=body, headers=auth)
        assert response.status_code == 400
        assert response.json()["error"] == "Complete shipping address is required"

    def test_malformed_item(self, client, auth):
        body = {**ORDER_BODY, "items": [{"name": "Runner X2000", "size": 10, "price": 10.0, "quantity": 0}]}
        response = client.post("/api/orders", json=body, headers=auth)
        assert response.status_code == 400

    def test_total_mismatch(self, client, auth):
        response = client.post("/api/orders", json={**ORDER_BODY, "totalAmount": 1.0}, headers=auth)
        assert response.status_code == 400


class TestQueryEndpoints:
    def test_list_orders(self, client, auth):
        order_id = _create_order(client, auth)
        response = client.get("/api/orders", headers=auth)
        assert response.status_code == 200
        orders = response.json()["orders"]
        assert [o["orderId"] for o in orders] == [order_id]
        assert orders[0]["status"] == "Processing"
        assert orders[0]["totalAmount"] == 259.98
        assert orders[0]["shippingAddress"]["zipCode"] == "10001"
        assert orders[0]["items"][0]["productId"] == "SKU-001"

    def test_list_excludes_cancelled_history_keeps_it(self, client, auth):
        kept = _create_order(client, auth)
        cancelled = _create_order(client, auth)
        client.delete(f"/api/orders/{cancelled}", headers=auth)

        active = [o["orderId"] for o in client.get("/api/orders", headers=auth).json()["orders"]]
        history = [o["orderId"] for o in client.get("/api/orders/history", headers=auth).json()["orders"]]
        assert active == [kept]
        assert set(history) == {kept, cancelled}

    def test_get_order(self, client, auth):
        order_id = _create_order(client, auth)
        response = client.get(f"/api/orders/{order_id}", headers=auth)
        assert response.status_code == 200
        order = response.json()["order"]
        assert order["orderId"] == order_id
        assert order["trackingNumber"] is None

    def test_other_users_order_is_not_found(self, client, auth, other_auth):
        order_id = _create_order(client, auth)
        response = client.get(f"/api/orders/{order_id}", headers=other_auth)
        assert response.status_code == 404
        assert response.json() == {"error": "Order not found"}

    def test_orders_are_per_user(self, client, auth, other_auth):
        _create_order(client, auth)
        assert client.get("/api/orders", headers=other_auth).json() == {"orders": []}


class TestUpdateStatusEndpoint:
    def test_ship_then_fetch(self, client, auth):
        order_id = _create_order(client, auth)
        response = client.patch(f"/api/orders/{order_id}/status", json={"status": "Shipped"}, headers=auth)
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Order status updated successfully"
        assert data["status"] == "Shipped"
        assert data["trackingNumber"].startswith("TRK-")

        order = client.get(f"/api/orders/{order_id}", headers=auth).json()["order"]
        assert order["status"] == "Shipped"
        assert order["trackingNumber"] == data["trackingNumber"]

    def test_invalid_status(self, client, auth):
        order_id = _create_order(client, auth)
        response = client.patch(f"/api/orders/{order_id}/status", json={"status": "Lost"}, headers=auth)
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid status"

    def test_unknown_order(self, client, auth):
        response = client.patch("/api/orders/ORD-0-MISSING00/status", json={"status": "Shipped"}, headers=auth)
        assert response.status_code == 404


class TestCancelEndpoint:
    def test_cancel(self, client, auth):
        order_id = _create_order(client, auth)
        response = client.delete(f"/api/orders/{order_id}", headers=auth)
        assert response.status_code == 200
        assert response.json() == {
            "message": "Order cancelled successfully",
            "orderId": order_id,
            "status": "Cancelled",
        }

    def test_cancel_twice(self, client, auth):
        order_id = _create_order(client, auth)
        client.delete(f"/api/orders/{order_id}", headers=auth)
        response = client.delete(f"/api/orders/{order_id}", headers=auth)
        assert response.status_code == 400
        assert response.json() == {
            "error": 'Cannot cancel order. Only orders in "Processing" status can be cancelled. '
            "Current status: Cancelled"
        }

    def test_cancel_shipped(self, client, auth):
        order_id = _create_order(client, auth)
        client.patch(f"/api/orders/{order_id}/status", json={"status": "Shipped"}, headers=auth)
        response = client.delete(f"/api/orders/{order_id}", headers=auth)
        assert response.status_code == 400
        assert response.json()["error"].endswith("Current status: Shipped")

    def test_cancel_someone_elses_order(self, client, auth, other_auth):
        order_id = _create_order(client, auth)
        response = client.delete(f"/api/orders/{order_id}", headers=other_auth)
        assert response.status_code == 404
        assert current_domain.repository_for(Order).get(order_id).status == "Processing"


class TestStoreFailures:
    def test_unexpected_error_becomes_500(self, client, auth, monkeypatch):
        from ordering.order import repository

        def _boom(self, user_id, include_cancelled=True):
            raise RuntimeError("connection refused")

        monkeypatch.setattr(repository.OrderRepository, "for_user", _boom)
        response = client.get("/api/orders", headers=auth)
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch orders"}
