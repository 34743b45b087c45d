"""User aggregate: a registered shopper identified by email."""

from datetime import UTC, datetime

from protean.fields import DateTime, String

from identity.domain import identity
from identity.user.events import UserRegistered
from identity.user.passwords import hash_password, verify_password


@identity.aggregate
class User:
    """A registered account on the store.

    The email is stored exactly as given and compared case-sensitively. Only
    the bcrypt hash of the password is ever kept.
    """

    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=255)
    registered_at: DateTime()

    @classmethod
    def register(cls, email, password):
        now = datetime.now(UTC)
        user = cls(
            email=email,
            password_hash=hash_password(password),
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                email=email,
                registered_at=now,
            )
        )
        return user

    def check_password(self, password) -> bool:
        return verify_password(password, self.password_hash)
