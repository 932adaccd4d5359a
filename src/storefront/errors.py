"""Client-side error taxonomy and API error payload parsing.

- ``TransportFailure``: the request never completed.
- ``ServerReportedError``: the API answered 4xx/5xx, possibly with a message.
- ``MalformedResponse``: the API answered 2xx with a body that does not decode.
- ``FormValidationError``: a form was rejected locally; nothing was sent.

Orders that were placed but whose stock update failed are not an exception;
they surface as the ``STOCK_UPDATE_FAILED`` attempt state.
"""

from __future__ import annotations

from typing import Any


class StorefrontError(Exception):
    """Base class for storefront failures."""


class TransportFailure(StorefrontError):
    def __init__(self, method: str, path: str, reason: str):
        super().__init__(f"{method} {path} failed: {reason}")
        self.method = method
        self.path = path
        self.reason = reason


class ServerReportedError(StorefrontError):
    def __init__(self, status_code: int, message: str | None, payload: Any = None):
        super().__init__(message or f"Request failed with status {status_code}")
        self.status_code = status_code
        self.message = message
        self.payload = payload


class MalformedResponse(StorefrontError):
    """The API answered successfully but the body had an unexpected shape."""

    def __init__(self, what: str, reason: str):
        super().__init__(f"Unexpected {what} payload: {reason}")
        self.what = what
        self.reason = reason


class FormValidationError(StorefrontError):
    def __init__(self, errors: dict[str, list[str]]):
        super().__init__("; ".join(f"{field}: {msgs[0]}" for field, msgs in errors.items() if msgs))
        self.errors = errors


def extract_error_message(body: Any) -> str | None:
    """Pull a human-readable message out of an API error body.

    Handles the shapes the API produces:

    - ``{"message": "..."}`` from domain and auth failures
    - ``{"error": "msg"}`` or ``{"error": {"field": ["msg"]}}``
    - Pydantic validation (422): ``{"detail": [{"loc": [...], "msg": "..."}]}``

    Returns ``None`` when the body carries nothing usable.
    """
    if not isinstance(body, dict):
        return None

    message = body.get("message")
    if isinstance(message, str) and message:
        return message

    if "error" in body:
        error = body["error"]
        if isinstance(error, dict):
            parts = []
            for value in error.values():
                parts.append(str(value[0]) if isinstance(value, list) and value else str(value))
            return " | ".join(parts) or None
        if error:
            return str(error)

    detail = body.get("detail")
    if isinstance(detail, list):
        parts = []
        for err in detail:
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return " | ".join(parts) or None
    if isinstance(detail, str) and detail:
        return detail

    return None
