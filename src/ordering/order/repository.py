"""Repository for the Order aggregate."""

from ordering.domain import ordering
from ordering.order.order import Order, OrderStatus


@ordering.repository(part_of=Order)
class OrderRepository:
    def find(self, order_id: str) -> Order | None:
        orders = self._dao.query.filter(id=order_id).all().items
        return orders[0] if orders else None

    def owned_by(self, order_id: str, user_id: str) -> Order | None:
        """The order, if it exists and belongs to ``user_id``.

        Someone else's order and a missing order look the same to callers.
        """
        orders = self._dao.query.filter(id=order_id, user_id=str(user_id)).all().items
        return orders[0] if orders else None

    def for_user(self, user_id: str, include_cancelled: bool = True) -> list[Order]:
        """A user's orders, newest first."""
        query = self._dao.query.filter(user_id=str(user_id))
        if not include_cancelled:
            query = query.exclude(status=OrderStatus.CANCELLED.value)
        return query.order_by("-order_date").all().items

    def id_taken(self, order_id: str) -> bool:
        return self._dao.query.filter(id=order_id).all().total > 0

    def save_transition(
        self,
        order: Order,
        expected_status: str,
    ) -> bool:
        """Persist ``order``'s new status only if the stored status is still ``expected_status``.

        Returns ``False`` when another writer changed the status first, in
        which case nothing is written.
        """
        updated = self._dao.query.filter(id=order.id, status=expected_status).update_all(
            status=order.status,
            status_updated_at=order.status_updated_at,
            tracking_number=order.tracking_number,
        )
        return updated > 0
