"""Repository for the User aggregate."""

from identity.domain import identity
from identity.user.user import User


@identity.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> User | None:
        """Exact, case-sensitive lookup by email."""
        users = self._dao.query.filter(email=email).all().items
        return users[0] if users else None
