"""Sample accounts and orders for local development.

Seeding is idempotent: existing users are reused and orders whose id is
already stored are skipped.
"""

from datetime import UTC, datetime

import structlog

logger = structlog.get_logger(__name__)

SAMPLE_PASSWORD = "password123"

SAMPLE_USERS = (
    "john.doe@example.com",
    "jane.smith@example.com",
    "test@sneakerhub.com",
)

_JOHN_ADDRESS = {
    "name": "John Doe",
    "street": "123 Main Street",
    "city": "New York",
    "state": "NY",
    "zip_code": "10001",
}
_JANE_ADDRESS = {
    "name": "Jane Smith",
    "street": "456 Oak Avenue",
    "city": "Los Angeles",
    "state": "CA",
    "zip_code": "90001",
}

# (order id, owner email, placed on, status, status changed on, tracking number, address, items)
SAMPLE_ORDERS = (
    (
        "ORD-2025-1234ABC",
        "john.doe@example.com",
        datetime(2025, 10, 15, tzinfo=UTC),
        "Delivered",
        datetime(2025, 10, 22, tzinfo=UTC),
        "TRK-2025-DELIVERED",
        _JOHN_ADDRESS,
        [{"product_id": "SKU-001", "name": "Runner X2000", "size": 10, "price": 129.99, "quantity": 2}],
    ),
    (
        "ORD-2025-5678DEF",
        "john.doe@example.com",
        datetime(2025, 11, 1, tzinfo=UTC),
        "Shipped",
        datetime(2025, 11, 5, tzinfo=UTC),
        "TRK-2025-SHIPPED",
        _JOHN_ADDRESS,
        [
            {"product_id": "SKU-002", "name": "Casual Max", "size": 9, "price": 79.50, "quantity": 1},
            {"product_id": "SKU-003", "name": "Sport Pro Elite", "size": 10, "price": 79.99, "quantity": 1},
        ],
    ),
    (
        "ORD-2025-9012GHI",
        "john.doe@example.com",
        datetime(2025, 11, 8, tzinfo=UTC),
        "Processing",
        None,
        None,
        _JOHN_ADDRESS,
        [{"product_id": "SKU-004", "name": "Urban Street Classic", "size": 10, "price": 99.99, "quantity": 2}],
    ),
    (
        "ORD-2025-7788MNO",
        "john.doe@example.com",
        datetime(2025, 9, 20, tzinfo=UTC),
        "Cancelled",
        datetime(2025, 9, 21, tzinfo=UTC),
        None,
        _JOHN_ADDRESS,
        [{"product_id": "SKU-003", "name": "Sport Pro Elite", "size": 11, "price": 79.99, "quantity": 1}],
    ),
    (
        "ORD-2025-3456JKL",
        "jane.smith@example.com",
        datetime(2025, 11, 5, tzinfo=UTC),
        "Shipped",
        datetime(2025, 11, 7, tzinfo=UTC),
        "TRK-2025-JANE001",
        _JANE_ADDRESS,
        [{"product_id": "SKU-001", "name": "Runner X2000", "size": 8, "price": 129.99, "quantity": 1}],
    ),
)


def seed_users(identity) -> dict[str, str]:
    """Register the sample users. Returns a map of email to user id."""
    from identity.user.registration import RegisterUser
    from identity.user.user import User

    user_ids = {}
    with identity.domain_context():
        repo = identity.repository_for(User)
        for email in SAMPLE_USERS:
            existing = repo.find_by_email(email)
            if existing is not None:
                user_ids[email] = str(existing.id)
                continue
            user_ids[email] = identity.process(
                RegisterUser(email=email, password=SAMPLE_PASSWORD),
                asynchronous=False,
            )
            logger.info("sample_user_created", email=email)
    return user_ids


def seed_orders(ordering, user_ids: dict[str, str]) -> int:
    """Store the sample orders. Returns how many were created."""
    from ordering.order.order import Order

    created = 0
    with ordering.domain_context():
        repo = ordering.repository_for(Order)
        for order_id, email, placed_on, status, changed_on, tracking, address, items in SAMPLE_ORDERS:
            if repo.id_taken(order_id):
                continue
            order = Order.place(
                order_id=order_id,
                user_id=user_ids[email],
                items_data=items,
                shipping_address=address,
                now=placed_on,
            )
            if tracking:
                order.tracking_number = tracking
            if changed_on is not None:
                order.force_status(status, now=changed_on)
            repo.add(order)
            created += 1
            logger.info("sample_order_created", order_id=order_id, status=status)
    return created


def seed(identity, ordering) -> None:
    user_ids = seed_users(identity)
    created = seed_orders(ordering, user_ids)
    logger.info("seed_complete", users=len(user_ids), orders=created)
