"""FastAPI routes for the Ordering domain: placing, tracking and cancelling orders."""

import json

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from identity.api.dependencies import require_user
from identity.user.tokens import TokenClaims
from ordering.api.schemas import (
    CreateOrderRequest,
    OrderDetailResponse,
    OrderListResponse,
    OrderPlacedResponse,
    OrderStatusResponse,
    UpdateStatusRequest,
)
from ordering.order.cancellation import CancelOrder
from ordering.order.creation import CreateOrder
from ordering.order.queries import get_order, list_active_orders, list_order_history
from ordering.order.status import UpdateOrderStatus
from shared.api import operation_boundary

router = APIRouter(prefix="/api/orders", tags=["orders"])


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------
@router.get("", response_model=OrderListResponse)
async def list_orders(claims: TokenClaims = Depends(require_user)) -> OrderListResponse:
    with operation_boundary("Failed to fetch orders"):
        orders = list_active_orders(claims.user_id)
    return OrderListResponse(orders=orders)


@router.get("/history", response_model=OrderListResponse)
async def order_history(claims: TokenClaims = Depends(require_user)) -> OrderListResponse:
    with operation_boundary("Failed to fetch order history"):
        orders = list_order_history(claims.user_id)
    return OrderListResponse(orders=orders)


@router.get("/{order_id}", response_model=OrderDetailResponse)
async def order_detail(order_id: str, claims: TokenClaims = Depends(require_user)) -> OrderDetailResponse:
    with operation_boundary("Failed to fetch order"):
        order = get_order(order_id, claims.user_id)
    return OrderDetailResponse(order=order)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@router.post("", status_code=201, response_model=OrderPlacedResponse)
async def create_order(
    body: CreateOrderRequest,
    claims: TokenClaims = Depends(require_user),
) -> OrderPlacedResponse:
    address = body.shipping_address.model_dump() if body.shipping_address else {}
    command = CreateOrder(
        user_id=claims.user_id,
        items=json.dumps([item.model_dump() for item in body.items]),
        shipping_address=json.dumps(address),
        total_amount=body.total_amount,
    )
    with operation_boundary("Failed to create order"):
        placed = current_domain.process(command, asynchronous=False)
    return OrderPlacedResponse(
        message="Order placed successfully",
        order_id=placed["order_id"],
        status=placed["status"],
        estimated_delivery=placed["estimated_delivery"],
    )


@router.patch("/{order_id}/status", response_model=OrderStatusResponse)
async def update_order_status(
    order_id: str,
    body: UpdateStatusRequest,
    claims: TokenClaims = Depends(require_user),
) -> OrderStatusResponse:
    command = UpdateOrderStatus(
        order_id=order_id,
        status=body.status,
        tracking_number=body.tracking_number,
    )
    with operation_boundary("Failed to update order status"):
        updated = current_domain.process(command, asynchronous=False)
    return OrderStatusResponse(
        message="Order status updated successfully",
        order_id=updated["order_id"],
        status=updated["status"],
        tracking_number=updated["tracking_number"],
    )


@router.delete("/{order_id}", response_model=OrderStatusResponse, response_model_exclude_none=True)
async def cancel_order(order_id: str, claims: TokenClaims = Depends(require_user)) -> OrderStatusResponse:
    command = CancelOrder(order_id=order_id, user_id=claims.user_id)
    with operation_boundary("Failed to cancel order"):
        current_domain.process(command, asynchronous=False)
    return OrderStatusResponse(
        message="Order cancelled successfully",
        order_id=order_id,
        status="Cancelled",
    )
