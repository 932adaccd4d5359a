"""Repository for the User aggregate."""

from marketplace.domain import marketplace
from marketplace.user.user import User


@marketplace.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> User | None:
        """Find a User by email, case-insensitively."""
        users = self._dao.query.filter(email=email.strip().lower()).all().items
        return users[0] if users else None
