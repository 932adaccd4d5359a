"""Shared fixtures for storefront tests: a scripted API behind ``httpx.MockTransport``."""

import httpx
import pytest
from storefront.api import MarketplaceClient
from storefront.cart import CartState
from storefront.catalog import CatalogFetcher
from storefront.notices import NoticeBoard
from storefront.orders import OrderSubmitter
from storefront.session import Session, SessionStore

BASE_URL = "http://marketplace.test"


def product_card(
    product_id,
    name="Pizza",
    available=5,
    discounted=100.0,
    original=200.0,
    lat=27.7,
    lng=85.3,
    emoji="🍕",
):
    return {
        "_id": product_id,
        "name": name,
        "description": "Fresh today",
        "originalPrice": original,
        "discountedPrice": discounted,
        "discountPercentage": round((original - discounted) / original * 100, 2),
        "availableQuantity": available,
        "isAvailable": available > 0,
        "status": "active" if available else "sold-out",
        "category": {"_id": "cat-1", "name": "Pizza", "emoji": emoji},
        "sellerId": {
            "_id": "seller-1",
            "name": "Sita",
            "coords": {"lat": lat, "lng": lng} if lat is not None else None,
        },
    }


class FakeMarketplace:
    """Answers requests from scripted routes and records every request it sees.

    A route is either a fixed ``(status, body)`` or a callable taking the
    ``httpx.Request`` and returning ``(status, body)``. Unscripted routes 404.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], object] = {}

    def on(self, method, path, status=200, json=None, handler=None):
        self.routes[(method, path)] = handler or (status, json)

    def fail(self, method, path):
        """Make ``path`` fail at the transport level."""

        def _raise(request):
            raise httpx.ConnectError("connection refused", request=request)

        self.routes[(method, path)] = _raise

    def calls(self, method, path) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "Record not found"})
        status, body = route(request) if callable(route) else route
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)


@pytest.fixture()
def card():
    """Factory for API product payloads."""
    return product_card


@pytest.fixture()
def fake_api():
    return FakeMarketplace()


@pytest.fixture()
def session():
    return Session(
        user_id="buyer-1",
        name="Hari",
        email="hari@example.com",
        role="user",
        user_preferences=["pizza", "sushi"],
        token="token-123",
    )


@pytest.fixture()
def client(fake_api, session):
    return MarketplaceClient(BASE_URL, session=session, transport=httpx.MockTransport(fake_api))


@pytest.fixture()
def cart():
    return CartState()


@pytest.fixture()
def notices():
    return NoticeBoard()


@pytest.fixture()
def catalog(client, session, cart):
    return CatalogFetcher(client, session, cart)


@pytest.fixture()
def submitter(client, session, catalog, notices):
    return OrderSubmitter(client, session, catalog, notices)


@pytest.fixture()
def session_store(tmp_path):
    return SessionStore(tmp_path / "session.json")
