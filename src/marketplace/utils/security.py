"""Password hashing and signed access tokens."""

import os
from datetime import UTC, datetime, timedelta

import bcrypt
import jwt

_ALGORITHM = "HS256"
_DEFAULT_SECRET = "change-me-in-production"


def _secret() -> str:
    return os.getenv("JWT_SECRET", _DEFAULT_SECRET)


def _ttl() -> timedelta:
    return timedelta(days=int(os.getenv("JWT_TTL_DAYS", "7")))


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=10)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def issue_token(user_id: str, email: str, role: str) -> str:
    """Sign a time-bound token carrying the user's id, email and role."""
    now = datetime.now(UTC)
    claims = {
        "userId": str(user_id),
        "email": email,
        "role": role,
        "iat": now,
        "exp": now + _ttl(),
    }
    return jwt.encode(claims, _secret(), algorithm=_ALGORITHM)


def decode_token(token: str) -> dict:
    """Verify a token and return its claims.

    Raises ``jwt.InvalidTokenError`` (or a subclass such as
    ``jwt.ExpiredSignatureError``) when the token cannot be trusted.
    """
    return jwt.decode(token, _secret(), algorithms=[_ALGORITHM])
