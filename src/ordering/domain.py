"""Ordering bounded context: order lifecycle and order queries.

Owns order placement, status transitions (Processing → Shipped → Delivered,
or Processing → Cancelled), tracking-number assignment, and the read paths
that rebuild order aggregates for the storefront.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

ordering = Domain(name="ordering")
