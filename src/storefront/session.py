"""Explicit session context with load/save boundaries.

One ``Session`` object is shared by every component of a running storefront.
Login and logout mutate it in place, so the API client, catalog and order
submitter all see the same user and token without a global store.
"""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path

from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class Session:
    """The signed-in user, or an anonymous visitor when ``token`` is None."""

    user_id: str | None = None
    name: str | None = None
    email: str | None = None
    role: str | None = None
    user_preferences: list[str] = field(default_factory=list)
    token: str | None = None

    @property
    def is_logged_in(self) -> bool:
        return bool(self.token and self.user_id)

    @property
    def is_seller(self) -> bool:
        return self.is_logged_in and self.role == "seller"

    def apply_login(self, payload: dict) -> None:
        """Populate from a ``POST /login`` response body."""
        user = payload.get("user")
        if not isinstance(user, dict):
            user = {}
        self.user_id = user.get("_id")
        self.name = user.get("name")
        self.email = user.get("email")
        self.role = user.get("role")
        self.user_preferences = list(user.get("userPreferences") or [])
        self.token = payload.get("token")

    def reset(self) -> None:
        anonymous = Session()
        for key, value in asdict(anonymous).items():
            setattr(self, key, value)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Session":
        known = {k: data[k] for k in cls.__dataclass_fields__ if k in data}
        return cls(**known)


class SessionStore:
    """Persists a session as JSON between process runs."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Session:
        """Read the saved session. A missing or unreadable file yields an anonymous session."""
        if not self.path.exists():
            return Session()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("session_load_failed", path=str(self.path), error=str(exc))
            return Session()
        if not isinstance(data, dict):
            logger.warning("session_load_failed", path=str(self.path), error="not an object")
            return Session()
        return Session.from_dict(data)

    def save(self, session: Session) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(session.to_dict()), encoding="utf-8")

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
