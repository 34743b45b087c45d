"""Order placement: command and handler."""

import json
from datetime import UTC, datetime

import structlog
from protean import handle
from protean.fields import Float, Identifier, Text
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.identifiers import generate_order_id
from ordering.order.order import Order
from shared.errors import InternalError

logger = structlog.get_logger(__name__)

# Attempts at drawing an unused order id before giving up
MAX_ID_ATTEMPTS = 5


@ordering.command(part_of="Order")
class CreateOrder:
    user_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of item dicts
    shipping_address = Text(required=True)  # JSON: address dict
    total_amount = Float()  # Optional, computed from items when absent


def _loads(value):
    return json.loads(value) if isinstance(value, str) else value


@ordering.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        repo = current_domain.repository_for(Order)
        now = datetime.now(UTC)

        order = Order.place(
            order_id=self._unused_order_id(repo, now),
            user_id=command.user_id,
            items_data=_loads(command.items),
            shipping_address=_loads(command.shipping_address),
            total_amount=command.total_amount,
            now=now,
        )
        repo.add(order)

        logger.info(
            "order_placed",
            order_id=order.id,
            user_id=str(order.user_id),
            item_count=len(order.items),
            total_amount=order.total_amount,
        )
        return {
            "order_id": order.id,
            "status": order.status,
            "estimated_delivery": order.estimated_delivery,
        }

    @staticmethod
    def _unused_order_id(repo, now):
        for _ in range(MAX_ID_ATTEMPTS):
            order_id = generate_order_id(now)
            if not repo.id_taken(order_id):
                return order_id
            logger.warning("order_id_collision", order_id=order_id)
        raise InternalError("Could not allocate an order id")
