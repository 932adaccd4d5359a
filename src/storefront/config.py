"""Storefront configuration, read from the environment."""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_SESSION_FILE = Path.home() / ".foodmarket" / "session.json"


@dataclass(frozen=True)
class StorefrontConfig:
    api_url: str = DEFAULT_API_URL
    session_file: Path = DEFAULT_SESSION_FILE
    timeout: float | None = None  # seconds; None waits indefinitely
    payment_method: str = "Cash"

    @classmethod
    def from_env(cls) -> "StorefrontConfig":
        timeout = os.getenv("STOREFRONT_TIMEOUT")
        return cls(
            api_url=os.getenv("STOREFRONT_API_URL", DEFAULT_API_URL).rstrip("/"),
            session_file=Path(os.getenv("STOREFRONT_SESSION_FILE", str(DEFAULT_SESSION_FILE))),
            timeout=float(timeout) if timeout else None,
        )
