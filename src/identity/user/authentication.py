"""Login: verifies an email/password pair against the stored hash."""

import structlog
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from identity.user.user import User
from shared.errors import AuthError

logger = structlog.get_logger(__name__)


def authenticate(email, password) -> User:
    """Return the user owning ``email`` if ``password`` matches.

    Unknown emails and wrong passwords fail identically so callers cannot
    probe which accounts exist.
    """
    if not email or not password:
        raise ValidationError({"credentials": ["Email and password are required"]})

    user = current_domain.repository_for(User).find_by_email(email)
    if user is None or not user.check_password(password):
        logger.info("login_rejected")
        raise AuthError("Invalid credentials")

    logger.info("login_succeeded", user_id=str(user.id))
    return user
