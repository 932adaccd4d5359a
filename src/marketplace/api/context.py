"""Request plumbing shared by the app and its tests: domain context and bearer tokens."""

import jwt
from fastapi import Header, HTTPException, Request

from marketplace.domain import marketplace
from marketplace.utils.logging import bind_request, unbind_request
from marketplace.utils.security import decode_token


async def domain_context_middleware(request: Request, call_next):
    """Push the marketplace domain context for each request."""
    bind_request(request.method, request.url.path)
    try:
        with marketplace.domain_context():
            response = await call_next(request)
    finally:
        unbind_request()
    return response


def bearer_claims(authorization: str | None = Header(None)) -> dict | None:
    """Claims of the bearer token, when one is sent.

    Anonymous requests pass through with ``None``; a malformed, forged or
    expired token is rejected with 401.
    """
    if not authorization:
        return None

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise HTTPException(status_code=401, detail="Invalid authorization header")

    try:
        return decode_token(token)
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Session expired, please log in again") from None
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=401, detail="Invalid token") from None
