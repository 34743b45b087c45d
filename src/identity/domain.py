"""Identity bounded context: user accounts and bearer credentials.

Registers users by email and password and authenticates them. Tokens are
signed and stateless, so other contexts verify them without touching the
identity store.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
identity = Domain(name="identity")
