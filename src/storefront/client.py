"""HTTP client the storefront uses to talk to the SneakerHub API."""

import requests
import structlog

from ordering.order.views import OrderView

logger = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000/api"


class ApiError(Exception):
    """The API answered with an error, or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def is_auth_error(self) -> bool:
        return self.status_code == 401


class OrdersClient:
    """Thin wrapper over the REST endpoints.

    Holds the bearer token returned by ``login()`` / ``register()`` and sends
    it on every order call. A ``requests.Session`` can be injected for
    connection reuse or testing.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: str | None = None,
        session: requests.Session | None = None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    # -------------------------------------------------------------------
    # Auth
    # -------------------------------------------------------------------
    def register(self, email: str, password: str) -> dict:
        data = self._request("POST", "/auth/register", json={"email": email, "password": password})
        self.token = data["token"]
        return data

    def login(self, email: str, password: str) -> dict:
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        self.token = data["token"]
        return data

    def logout(self) -> None:
        self.token = None

    # -------------------------------------------------------------------
    # Orders
    # -------------------------------------------------------------------
    def list_orders(self) -> list[OrderView]:
        data = self._request("GET", "/orders")
        return [OrderView.model_validate(order) for order in data["orders"]]

    def order_history(self) -> list[OrderView]:
        data = self._request("GET", "/orders/history")
        return [OrderView.model_validate(order) for order in data["orders"]]

    def get_order(self, order_id: str) -> OrderView:
        data = self._request("GET", f"/orders/{order_id}")
        return OrderView.model_validate(data["order"])

    def create_order(self, items: list[dict], shipping_address: dict, total_amount: float | None = None) -> dict:
        payload = {"items": items, "shippingAddress": shipping_address}
        if total_amount is not None:
            payload["totalAmount"] = total_amount
        return self._request("POST", "/orders", json=payload)

    def cancel_order(self, order_id: str) -> dict:
        return self._request("DELETE", f"/orders/{order_id}")

    def update_status(self, order_id: str, status: str, tracking_number: str | None = None) -> dict:
        payload = {"status": status}
        if tracking_number:
            payload["trackingNumber"] = tracking_number
        return self._request("PATCH", f"/orders/{order_id}/status", json=payload)

    def health(self) -> dict:
        return self._request("GET", "/health")

    # -------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------
    def _request(self, method: str, path: str, json: dict | None = None) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        try:
            response = self.session.request(
                method,
                f"{self.base_url}{path}",
                json=json,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("api_unreachable", method=method, path=path, error=str(exc))
            raise ApiError("Could not reach the SneakerHub API") from exc

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if not response.ok:
            message = data.get("error") or response.reason or "Request failed"
            logger.info("api_error", method=method, path=path, status_code=response.status_code, error=message)
            raise ApiError(message, status_code=response.status_code)
        return data
