"""Administrative status override: command and handler.

Unlike cancellation this path does not consult the lifecycle map. Any known
status may be set from any state, including moving an order backwards.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order, OrderStatus

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    status = String(max_length=20)
    tracking_number = String(max_length=50)


@ordering.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_status(self, command):
        target = OrderStatus.parse(command.status)

        repo = current_domain.repository_for(Order)
        order = repo.find(command.order_id)
        if order is None:
            raise ObjectNotFoundError({"_entity": ["Order not found"]})

        previous = order.status
        order.force_status(target, tracking_number=command.tracking_number)
        repo.add(order)

        logger.info(
            "order_status_overridden",
            order_id=order.id,
            from_status=previous,
            to_status=order.status,
        )
        return {
            "order_id": order.id,
            "status": order.status,
            "tracking_number": order.tracking_number,
        }
