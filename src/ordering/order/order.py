"""Order aggregate: the core of the ordering domain.

An order is placed in Processing and moves forward only:

    Processing → Shipped → Delivered
    Processing → Cancelled

Delivered and Cancelled are terminal. Two capability levels act on the
same status field:

- ``transition_to()`` / ``cancel()`` follow the lifecycle map and are what
  shoppers can trigger.
- ``force_status()`` is the administrative override. It accepts any known
  status from any state.
"""

from datetime import UTC, datetime, timedelta
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import (
    DateTime,
    Float,
    HasMany,
    Identifier,
    Integer,
    String,
    ValueObject,
)

from ordering.domain import ordering
from ordering.order.identifiers import generate_tracking_number
from shared.errors import InvalidTransitionError
from shared.settings import get_settings


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    @classmethod
    def parse(cls, value):
        """Return the member for ``value`` or raise ``ValidationError``."""
        try:
            return cls(value)
        except ValueError:
            raise ValidationError({"status": ["Invalid status"]}) from None


# Lifecycle map for shopper-visible transitions
_VALID_TRANSITIONS = {
    OrderStatus.PROCESSING: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}

CANCEL_REJECTED_MESSAGE = (
    'Cannot cancel order. Only orders in "Processing" status can be cancelled. Current status: {status}'
)

# Money is compared to the cent
_TOTAL_TOLERANCE = 0.01


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@ordering.value_object(part_of="Order")
class ShippingAddress:
    """Where the order is delivered. Captured at checkout and never edited."""

    name = String(required=True, max_length=100)
    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=20)

    @invariant.post
    def no_blank_lines(self):
        blank = [
            field
            for field in ("name", "street", "city", "state", "zip_code")
            if not str(getattr(self, field) or "").strip()
        ]
        if blank:
            raise ValidationError({"shipping_address": ["Complete shipping address is required"]})


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderItem:
    """A purchased product line: one shoe model, one size, some quantity."""

    product_id = String(max_length=50)
    name = String(required=True, max_length=255)
    size = Integer(required=True)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)

    @property
    def line_total(self):
        return round(self.price * self.quantity, 2)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    user_id = Identifier(required=True)
    status = String(
        max_length=20,
        choices=OrderStatus,
        default=OrderStatus.PROCESSING.value,
    )
    total_amount = Float(required=True, min_value=0.0)
    items = HasMany(OrderItem)
    shipping_address = ValueObject(ShippingAddress)
    order_date = DateTime()
    status_updated_at = DateTime()
    estimated_delivery = DateTime()
    tracking_number = String(max_length=50)

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        order_id,
        user_id,
        items_data,
        shipping_address,
        total_amount=None,
        now=None,
    ):
        """Place a new order in Processing.

        Args:
            order_id: Pre-generated order identifier (``ORD-...``).
            user_id: The shopper placing the order.
            items_data: List of dicts with name, size, price, quantity and
                optionally product_id.
            shipping_address: Dict with name, street, city, state, zip_code.
            total_amount: Total claimed by the caller. When given it must
                match the item total to the cent; when omitted it is
                computed.
        """
        _validate_items(items_data)
        address = _validate_address(shipping_address)

        items = [
            OrderItem(
                product_id=_product_id(item),
                name=item["name"],
                size=item["size"],
                price=item["price"],
                quantity=item["quantity"],
            )
            for item in items_data
        ]
        computed_total = round(sum(item.price * item.quantity for item in items), 2)
        if total_amount is not None and abs(float(total_amount) - computed_total) > _TOTAL_TOLERANCE:
            raise ValidationError(
                {"total_amount": [f"Total amount {total_amount} does not match item total {computed_total:.2f}"]}
            )

        placed_at = now or datetime.now(UTC)
        return cls(
            id=order_id,
            user_id=user_id,
            status=OrderStatus.PROCESSING.value,
            total_amount=computed_total,
            items=items,
            shipping_address=address,
            order_date=placed_at,
            status_updated_at=placed_at,
            estimated_delivery=placed_at + timedelta(days=get_settings().DELIVERY_WINDOW_DAYS),
        )

    # -------------------------------------------------------------------
    # Queries on state
    # -------------------------------------------------------------------
    @property
    def current_status(self):
        return OrderStatus(self.status)

    @property
    def is_cancellable(self):
        return self.current_status == OrderStatus.PROCESSING

    def can_transition_to(self, target_status):
        return target_status in _VALID_TRANSITIONS.get(self.current_status, set())

    def belongs_to(self, user_id):
        return str(self.user_id) == str(user_id)

    # -------------------------------------------------------------------
    # Shopper-visible transitions
    # -------------------------------------------------------------------
    def transition_to(self, target_status, now=None):
        """Move along the lifecycle map, rejecting anything it does not allow."""
        if not self.can_transition_to(target_status):
            raise InvalidTransitionError(
                f"Cannot transition from {self.status} to {target_status.value}",
                current_status=self.status,
            )
        self._apply_status(target_status, now)

    def cancel(self, now=None):
        """Cancel the order. Only Processing orders can be cancelled."""
        if not self.is_cancellable:
            raise InvalidTransitionError(
                CANCEL_REJECTED_MESSAGE.format(status=self.status),
                current_status=self.status,
            )
        self._apply_status(OrderStatus.CANCELLED, now)

    # -------------------------------------------------------------------
    # Administrative override
    # -------------------------------------------------------------------
    def force_status(self, new_status, now=None, tracking_number=None):
        """Set any known status regardless of the current one.

        ``tracking_number`` is a carrier-supplied number. It is only taken
        when this call ships the order for the first time; otherwise it is
        ignored.
        """
        target = new_status if isinstance(new_status, OrderStatus) else OrderStatus.parse(new_status)
        self._apply_status(target, now, tracking_number)

    def _apply_status(self, target_status, now=None, tracking_number=None):
        self.status = target_status.value
        self.status_updated_at = now or datetime.now(UTC)
        # A tracking number is assigned once, on first entry into Shipped
        if target_status == OrderStatus.SHIPPED and not self.tracking_number:
            self.tracking_number = tracking_number or generate_tracking_number(self.status_updated_at)


# ---------------------------------------------------------------------------
# Input checks
# ---------------------------------------------------------------------------
_REQUIRED_ITEM_FIELDS = ("name", "size", "price", "quantity")
_ADDRESS_FIELDS = ("name", "street", "city", "state", "zip_code")


def _validate_items(items_data):
    if not isinstance(items_data, list) or not items_data:
        raise ValidationError({"items": ["Order must contain at least one item"]})

    for item in items_data:
        if not isinstance(item, dict) or any(item.get(field) in (None, "") for field in _REQUIRED_ITEM_FIELDS):
            raise ValidationError({"items": ["Each item requires name, size, price and quantity"]})
        if not _is_number(item["price"]) or not _is_number(item["quantity"]):
            raise ValidationError({"items": ["Item price and quantity must be numbers"]})
        if item["price"] < 0:
            raise ValidationError({"items": ["Item price cannot be negative"]})
        if item["quantity"] < 1:
            raise ValidationError({"items": ["Item quantity must be at least 1"]})


def _is_number(value):
    return isinstance(value, int | float) and not isinstance(value, bool)


def _validate_address(shipping_address):
    if not isinstance(shipping_address, dict) or any(
        not str(shipping_address.get(field) or "").strip() for field in _ADDRESS_FIELDS
    ):
        raise ValidationError({"shipping_address": ["Complete shipping address is required"]})
    return ShippingAddress(**{field: shipping_address[field] for field in _ADDRESS_FIELDS})


def _product_id(item):
    product_id = item.get("product_id") or item.get("id")
    return str(product_id) if product_id is not None else None
