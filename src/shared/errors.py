"""Error taxonomy shared across bounded contexts.

Validation failures and missing objects use protean's own
``ValidationError`` and ``ObjectNotFoundError``. The classes here cover the
remaining categories the HTTP layer distinguishes.
"""

from protean.exceptions import ValidationError


class SneakerHubError(Exception):
    """Base class for non-protean application errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthError(SneakerHubError):
    """Missing, invalid or expired credentials."""

    status_code = 401


class ConflictError(SneakerHubError):
    """A unique key is already taken."""

    status_code = 409


class InternalError(SneakerHubError):
    """A persistence or infrastructure failure.

    The message is safe to show to callers; the underlying cause is chained
    and only logged.
    """

    status_code = 500


class InvalidTransitionError(ValidationError):
    """A lifecycle rule rejected a status change.

    Carries the status the object was in when the transition was attempted.
    """

    def __init__(self, message: str, current_status: str):
        super().__init__({"status": [message]})
        self.message = message
        self.current_status = current_status

    def __str__(self):
        return self.message
