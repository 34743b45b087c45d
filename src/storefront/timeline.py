"""Progress timeline shown on an order card."""

from dataclasses import dataclass
from datetime import datetime

from ordering.order.views import OrderView

FORWARD_STEPS = ("Processing", "Shipped", "Delivered")


@dataclass(frozen=True)
class TimelineStep:
    status: str
    completed: bool
    current: bool
    updated_at: datetime | None = None  # Only set on the current step


def build_timeline(order: OrderView) -> list[TimelineStep]:
    """Steps up to and including the order's current status are completed.

    A cancelled order never shipped, so its timeline is Processing followed
    by Cancelled. An unrecognised status leaves every forward step pending.
    """
    if order.status == "Cancelled":
        return [
            TimelineStep(status="Processing", completed=True, current=False),
            TimelineStep(
                status="Cancelled",
                completed=True,
                current=True,
                updated_at=order.status_updated_at,
            ),
        ]

    reached = FORWARD_STEPS.index(order.status) if order.status in FORWARD_STEPS else -1
    return [
        TimelineStep(
            status=status,
            completed=position <= reached,
            current=position == reached,
            updated_at=order.status_updated_at if position == reached else None,
        )
        for position, status in enumerate(FORWARD_STEPS)
    ]
