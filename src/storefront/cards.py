"""View models for order cards and receipts.

One card builder serves every page that lists orders; pages differ only in
the ``OrderCardOptions`` they pass.
"""

from dataclasses import dataclass, field

from ordering.order.views import OrderView
from storefront.display import StatusDisplay, display_for, format_date, format_money
from storefront.timeline import TimelineStep, build_timeline

CANCELLABLE_STATUS = "Processing"


@dataclass(frozen=True)
class OrderCardOptions:
    show_cancel_button: bool = False
    show_receipt_link: bool = False
    show_timeline: bool = True


@dataclass(frozen=True)
class CardLine:
    description: str  # "Runner X2000 (Size: 10) x 2"
    price: str


@dataclass(frozen=True)
class OrderCard:
    order_id: str
    heading: str
    placed_on: str
    status: StatusDisplay
    lines: list[CardLine]
    total: str
    address_lines: list[str]
    estimated_delivery: str | None = None
    tracking_number: str | None = None
    timeline: list[TimelineStep] | None = None
    show_cancel_button: bool = False
    receipt_link: str | None = None


def build_order_card(order: OrderView, options: OrderCardOptions | None = None) -> OrderCard:
    options = options or OrderCardOptions()
    address = order.shipping_address
    return OrderCard(
        order_id=order.order_id,
        heading=f"Order #{order.order_id}",
        placed_on=f"Placed on {format_date(order.order_date)}",
        status=display_for(order.status),
        lines=[
            CardLine(
                description=f"{item.name} (Size: {item.size}) x {item.quantity}",
                price=format_money(item.price),
            )
            for item in order.items
        ],
        total=format_money(order.total_amount),
        address_lines=[
            address.name,
            address.street,
            f"{address.city}, {address.state} {address.zip_code}",
        ],
        estimated_delivery=format_date(order.estimated_delivery) if order.estimated_delivery else None,
        tracking_number=order.tracking_number,
        timeline=build_timeline(order) if options.show_timeline else None,
        # Only an order still in Processing can be cancelled
        show_cancel_button=options.show_cancel_button and order.status == CANCELLABLE_STATUS,
        receipt_link=f"/orders/{order.order_id}/receipt" if options.show_receipt_link else None,
    )


@dataclass(frozen=True)
class ReceiptLine:
    name: str
    size: int
    quantity: int
    unit_price: float
    line_total: float


@dataclass(frozen=True)
class Receipt:
    order_id: str
    order_date: str
    status: str
    lines: list[ReceiptLine] = field(default_factory=list)
    item_count: int = 0
    total: float = 0.0
    tracking_number: str | None = None

    def as_text(self) -> str:
        rows = [f"Receipt for order {self.order_id}", self.order_date, ""]
        rows.extend(
            f"{line.name} (Size: {line.size}) {line.quantity} x {format_money(line.unit_price)}"
            f"  {format_money(line.line_total)}"
            for line in self.lines
        )
        rows.extend(["", f"Items: {self.item_count}", f"Total: {format_money(self.total)}"])
        if self.tracking_number:
            rows.append(f"Tracking: {self.tracking_number}")
        return "\n".join(rows)


def build_receipt(order: OrderView) -> Receipt:
    return Receipt(
        order_id=order.order_id,
        order_date=format_date(order.order_date),
        status=order.status,
        lines=[
            ReceiptLine(
                name=item.name,
                size=item.size,
                quantity=item.quantity,
                unit_price=item.price,
                line_total=item.line_total,
            )
            for item in order.items
        ],
        item_count=order.item_count,
        total=order.total_amount,
        tracking_number=order.tracking_number,
    )
