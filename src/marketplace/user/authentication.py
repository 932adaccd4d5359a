"""Credential exchange: verify email and password, hand back a signed token."""

from protean.utils.globals import current_domain

from marketplace.domain import logger
from marketplace.user.user import User
from marketplace.utils.security import issue_token, verify_password


class InvalidCredentialsError(Exception):
    """Email unknown or password mismatch. Deliberately does not say which."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)
        self.message = message


def authenticate(email: str, password: str) -> tuple[User, str]:
    """Return the matching user and a freshly signed token."""
    user = current_domain.repository_for(User).find_by_email(email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("login_rejected", email=email)
        raise InvalidCredentialsError()

    token = issue_token(user_id=str(user.id), email=user.email, role=user.role)
    logger.info("login_succeeded", user_id=str(user.id))
    return user, token
