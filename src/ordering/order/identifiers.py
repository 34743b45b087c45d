"""Human-readable identifiers for orders and shipments.

Both follow ``<PREFIX>-<epoch millis>-<9 uppercase alphanumerics>``, e.g.
``ORD-1718000000000-K3X9QZ2LM``. The timestamp keeps ids roughly sortable
and the random suffix keeps them from colliding within a millisecond.
"""

import secrets
import string
from datetime import UTC, datetime

_ALPHABET = string.ascii_uppercase + string.digits
_SUFFIX_LENGTH = 9


def _generate(prefix: str, now: datetime | None = None) -> str:
    moment = now or datetime.now(UTC)
    millis = int(moment.timestamp() * 1000)
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(_SUFFIX_LENGTH))
    return f"{prefix}-{millis}-{suffix}"


def generate_order_id(now: datetime | None = None) -> str:
    return _generate("ORD", now)


def generate_tracking_number(now: datetime | None = None) -> str:
    return _generate("TRK", now)
