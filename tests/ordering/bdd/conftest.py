"""Shared BDD fixtures and step definitions for the Ordering domain."""

import json

import pytest
from ordering.order.creation import CreateOrder
from ordering.order.order import Order
from ordering.order.queries import list_active_orders, list_order_history
from ordering.order.status import UpdateOrderStatus
from protean import current_domain
from pytest_bdd import given, parsers, then


@pytest.fixture()
def outcome():
    """Container for the error raised by the last When step, if any."""
    return {"exc": None}


def _stored(order_id):
    return current_domain.repository_for(Order).get(order_id)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a shopper has placed an order for {quantity:d} pairs of "{name}" at {price:f}'),
    target_fixture="order_id",
)
def _(user_id, address, quantity, name, price):
    items = [{"product_id": "SKU-001", "name": name, "size": 10, "price": price, "quantity": quantity}]
    placed = current_domain.process(
        CreateOrder(user_id=user_id, items=json.dumps(items), shipping_address=json.dumps(address)),
        asynchronous=False,
    )
    return placed["order_id"]


@given(parsers.cfparse('the order has been marked "{status}"'))
def _(order_id, status):
    current_domain.process(UpdateOrderStatus(order_id=order_id, status=status), asynchronous=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order status is "{status}"'))
def _(order_id, status):
    assert _stored(order_id).status == status


@then(parsers.cfparse("the order total is {total:f}"))
def _(order_id, total):
    assert _stored(order_id).total_amount == pytest.approx(total)


@then("the order appears in the shopper's active orders")
def _(order_id, user_id):
    assert order_id in {view.order_id for view in list_active_orders(user_id)}


@then("the order no longer appears in the shopper's active orders")
def _(order_id, user_id):
    assert order_id not in {view.order_id for view in list_active_orders(user_id)}


@then("the order appears in the shopper's order history")
def _(order_id, user_id):
    assert order_id in {view.order_id for view in list_order_history(user_id)}
