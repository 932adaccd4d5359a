"""Async HTTP client for the Marketplace API.

Every call returns decoded JSON or raises one of:

- ``TransportFailure`` when the request never completed
- ``ServerReportedError`` when the API answered with a 4xx/5xx status
- ``MalformedResponse`` when an endpoint that answers with an object did not
"""

from typing import Any

import httpx

from storefront.errors import MalformedResponse, ServerReportedError, TransportFailure, extract_error_message
from storefront.session import Session
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class MarketplaceClient:
    def __init__(
        self,
        base_url: str,
        session: Session | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.session = session if session is not None else Session()
        self._http = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "MarketplaceClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def _headers(self) -> dict[str, str]:
        if self.session.token:
            return {"Authorization": f"Bearer {self.session.token}"}
        return {}

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = await self._http.request(method, path, headers=self._headers(), **kwargs)
        except httpx.TransportError as exc:
            logger.warning("request_failed", method=method, path=path, error=str(exc))
            raise TransportFailure(method, path, str(exc)) from exc

        try:
            body = response.json() if response.content else None
        except ValueError:
            body = None

        if response.is_error:
            message = extract_error_message(body)
            logger.info("request_rejected", method=method, path=path, status=response.status_code, message=message)
            raise ServerReportedError(response.status_code, message, body)
        return body

    async def _request_object(self, method: str, path: str, **kwargs) -> dict:
        body = await self._request(method, path, **kwargs)
        if body is None:
            return {}
        if not isinstance(body, dict):
            raise MalformedResponse(path, f"expected an object, got {type(body).__name__}")
        return body

    # --- Catalog ---

    async def products_by_name(self, name: str, user_id: str) -> list[dict]:
        return await self._request("GET", "/products", params={"name": name, "userId": user_id})

    async def products_by_seller(self, seller_id: str) -> list[dict]:
        return await self._request("GET", "/products", params={"sellerId": seller_id})

    async def all_products(self) -> list[dict]:
        return await self._request("GET", "/products")

    async def products_by_ids(self, product_ids: list[str]) -> list[dict]:
        return await self._request("GET", "/product-search", params={"productIds": ",".join(product_ids)})

    async def categories(self) -> list[dict]:
        return await self._request("GET", "/categories")

    async def product_chips(self, category_id: str = "") -> list[dict]:
        return await self._request("GET", "/product-chips", params={"categoryId": category_id})

    async def create_product(self, payload: dict) -> dict:
        return await self._request_object("POST", "/products", json=payload)

    async def update_stock(self, product_id: str, available_quantity: int) -> dict:
        return await self._request_object(
            "PATCH", f"/products/update/{product_id}", json={"availableQuantity": available_quantity}
        )

    # --- Orders ---

    async def place_order(self, payload: dict) -> dict:
        return await self._request_object("POST", "/orders", json=payload)

    # --- Users ---

    async def register(self, payload: dict) -> dict:
        return await self._request_object("POST", "/register", json=payload)

    async def login(self, email: str, password: str) -> dict:
        return await self._request_object("POST", "/login", json={"email": email, "password": password})

    async def get_user(self, user_id: str) -> dict:
        return await self._request_object("GET", f"/users/{user_id}")

    async def add_preferences(self, user_id: str, preferences: list[str]) -> dict:
        return await self._request_object(
            "PATCH", f"/users/{user_id}/add-preferences", json={"userPreferences": preferences}
        )
