"""Catalog retrieval: by preference terms, product ids, category chips and seller.

Nothing is cached. Each fetch replaces the relevant state wholesale on
success; any failure is logged and leaves the previous state untouched.
"""

import asyncio
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from storefront.api import MarketplaceClient
from storefront.cart import CartState
from storefront.errors import MalformedResponse, StorefrontError
from storefront.models import Category, Product
from storefront.session import Session
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


def decode_list(payload: Any, model: type[M], what: str) -> list[M]:
    """Validate a list payload, raising ``MalformedResponse`` for any other shape."""
    if not isinstance(payload, list):
        raise MalformedResponse(what, f"expected a list, got {type(payload).__name__}")
    try:
        return [model.model_validate(item) for item in payload]
    except ValidationError as exc:
        raise MalformedResponse(what, f"{exc.error_count()} invalid field(s)") from exc


class CatalogFetcher:
    def __init__(self, client: MarketplaceClient, session: Session, cart: CartState):
        self.client = client
        self.session = session
        self.cart = cart
        self.categories: list[Category] = []
        self.chips: list[Category] = []
        self.active_chip_id: str | None = None
        self.seller_products: list[Product] = []
        self.picker_options: list[str] = []

    async def _products_for_term(self, term: str) -> list[Product]:
        return decode_list(await self.client.products_by_name(term, self.session.user_id), Product, "product")

    async def fetch_by_preferences(self) -> bool:
        """One request per preference term, concatenated in preference order.

        Terms that fail are logged and skipped. Returns False when nothing was
        loaded (no preferences, no user, or every term failed).
        """
        preferences = list(self.session.user_preferences)
        if not preferences or not self.session.user_id:
            return False

        results = await asyncio.gather(
            *(self._products_for_term(term) for term in preferences), return_exceptions=True
        )

        products: list[Product] = []
        failures = 0
        for term, result in zip(preferences, results):
            if isinstance(result, StorefrontError):
                failures += 1
                logger.warning("preference_fetch_failed", term=term, error=str(result))
                continue
            if isinstance(result, BaseException):
                raise result
            products.extend(result)

        if failures == len(preferences):
            return False

        self.cart.replace(products)
        logger.info("catalog_loaded", mode="preferences", terms=len(preferences), products=len(products))
        return True

    async def fetch_by_ids(self, product_ids: list[str]) -> bool:
        if not product_ids:
            self.cart.replace([])
            return True
        try:
            products = decode_list(await self.client.products_by_ids(product_ids), Product, "product")
        except StorefrontError as exc:
            logger.warning("product_search_failed", ids=len(product_ids), error=str(exc))
            return False
        self.cart.replace(products)
        return True

    async def fetch_chips(self, category_id: str = "") -> bool:
        """Load the chip bar and auto-select its first chip."""
        try:
            chips = decode_list(await self.client.product_chips(category_id), Category, "chip")
        except StorefrontError as exc:
            logger.warning("chips_fetch_failed", category_id=category_id, error=str(exc))
            return False
        self.chips = chips
        if not self.chips:
            return True
        return await self.select_chip(self.chips[0].id)

    async def select_chip(self, category_id: str) -> bool:
        chip = next((c for c in self.chips if c.id == category_id), None)
        if chip is None:
            logger.info("unknown_chip", category_id=category_id)
            return False
        loaded = await self.fetch_by_ids(chip.product_ids)
        if loaded:
            self.active_chip_id = chip.id
        return loaded

    async def fetch_categories(self) -> bool:
        try:
            self.categories = decode_list(await self.client.categories(), Category, "category")
        except StorefrontError as exc:
            logger.warning("categories_fetch_failed", error=str(exc))
            return False
        return True

    async def fetch_seller_products(self) -> bool:
        if not self.session.user_id:
            return False
        try:
            products = decode_list(await self.client.products_by_seller(self.session.user_id), Product, "product")
        except StorefrontError as exc:
            logger.warning("seller_products_fetch_failed", seller_id=self.session.user_id, error=str(exc))
            return False
        self.seller_products = products
        return True

    async def fetch_picker_options(self) -> bool:
        """Distinct product names for the preference picker, first occurrence wins."""
        try:
            payload = await self.client.all_products()
            if not isinstance(payload, list):
                raise MalformedResponse("product", f"expected a list, got {type(payload).__name__}")
        except StorefrontError as exc:
            logger.warning("picker_options_fetch_failed", error=str(exc))
            return False
        names = (p.get("name") for p in payload if isinstance(p, dict))
        self.picker_options = list(dict.fromkeys(n for n in names if isinstance(n, str) and n))
        return True

    async def enter(self) -> None:
        """Entering the home view: categories, then chips, then the preference catalog."""
        await self.fetch_categories()
        await self.fetch_chips()
        await self.fetch_by_preferences()
