"""Wires the storefront components around one session and one HTTP client."""

import httpx

from storefront.api import MarketplaceClient
from storefront.auth import AuthFlow
from storefront.cart import CartState
from storefront.catalog import CatalogFetcher
from storefront.config import StorefrontConfig
from storefront.map_view import MapController
from storefront.notices import NoticeBoard
from storefront.orders import OrderSubmitter
from storefront.seller import SellerCatalog
from storefront.session import SessionStore


class Storefront:
    def __init__(self, config: StorefrontConfig | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config or StorefrontConfig.from_env()
        self.store = SessionStore(self.config.session_file)
        self.session = self.store.load()
        self.notices = NoticeBoard()
        self.cart = CartState()
        self.client = MarketplaceClient(
            self.config.api_url, session=self.session, timeout=self.config.timeout, transport=transport
        )
        self.catalog = CatalogFetcher(self.client, self.session, self.cart)
        self.orders = OrderSubmitter(
            self.client, self.session, self.catalog, self.notices, payment_method=self.config.payment_method
        )
        self.map = MapController(self.cart, self.catalog, self.orders)
        self.auth = AuthFlow(self.client, self.session, self.store, self.notices)
        self.seller = SellerCatalog(self.client, self.session, self.catalog, self.notices)

    async def __aenter__(self) -> "Storefront":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    def leave(self) -> None:
        """Navigating away discards the on-screen catalog."""
        self.cart.clear()
