"""Order query paths.

Every read goes through ``order_view()`` so the list, history and detail
responses describe an order identically.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.order.order import Order
from ordering.order.views import AddressView, OrderItemView, OrderView


def order_view(order: Order) -> OrderView:
    """Rebuild the external representation of an order aggregate."""
    address = order.shipping_address
    return OrderView(
        order_id=str(order.id),
        status=order.status,
        total_amount=order.total_amount,
        order_date=order.order_date,
        status_updated_at=order.status_updated_at,
        estimated_delivery=order.estimated_delivery,
        tracking_number=order.tracking_number,
        shipping_address=AddressView(
            name=address.name,
            street=address.street,
            city=address.city,
            state=address.state,
            zip_code=address.zip_code,
        ),
        items=[
            OrderItemView(
                product_id=item.product_id,
                name=item.name,
                size=item.size,
                price=item.price,
                quantity=item.quantity,
            )
            for item in order.items
        ],
    )


def list_active_orders(user_id: str) -> list[OrderView]:
    """A user's orders that are not Cancelled, newest first."""
    orders = current_domain.repository_for(Order).for_user(user_id, include_cancelled=False)
    return [order_view(order) for order in orders]


def list_order_history(user_id: str) -> list[OrderView]:
    """Every order a user has placed, newest first."""
    orders = current_domain.repository_for(Order).for_user(user_id)
    return [order_view(order) for order in orders]


def get_order(order_id: str, user_id: str) -> OrderView:
    order = current_domain.repository_for(Order).owned_by(order_id, user_id)
    if order is None:
        raise ObjectNotFoundError({"_entity": ["Order not found"]})
    return order_view(order)
