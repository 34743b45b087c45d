"""Order cancellation by its owner: command and handler."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import CANCEL_REJECTED_MESSAGE, Order, OrderStatus
from shared.errors import InvalidTransitionError

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class CancelOrder:
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class CancelOrderHandler:
    @handle(CancelOrder)
    def cancel_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.owned_by(command.order_id, command.user_id)
        if order is None:
            raise ObjectNotFoundError({"_entity": ["Order not found"]})

        order.cancel()

        # The write only lands if the order is still Processing in the store
        if not repo.save_transition(order, expected_status=OrderStatus.PROCESSING.value):
            current = repo.find(order.id)
            status = current.status if current else order.status
            logger.info("order_cancel_lost_race", order_id=order.id, current_status=status)
            raise InvalidTransitionError(
                CANCEL_REJECTED_MESSAGE.format(status=status),
                current_status=status,
            )

        logger.info("order_cancelled", order_id=order.id, user_id=str(command.user_id))
        return order.id
