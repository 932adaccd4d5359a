"""Data contract for the map: markers, popups and event routing.

Drawing tiles and widgets is left to whatever front end consumes this.
"""

from typing import NamedTuple

from storefront.cart import CartState
from storefront.catalog import CatalogFetcher
from storefront.models import Product
from storefront.orders import OrderAttempt, OrderSubmitter

DEFAULT_EMOJI = "🍔"


class Marker(NamedTuple):
    product_id: str
    lat: float
    lng: float
    emoji: str
    discount_percentage: float


def markers_for(products) -> list[Marker]:
    """One marker per product whose seller has coordinates."""
    markers = []
    for product in products:
        coords = product.coords
        if coords is None:
            continue
        emoji = (product.category.emoji if product.category else None) or DEFAULT_EMOJI
        markers.append(Marker(product.id, coords.lat, coords.lng, emoji, product.discount_percentage))
    return markers


def popup_for(product: Product) -> dict:
    return {
        "productId": product.id,
        "name": product.name,
        "sellerName": product.seller.name if product.seller else None,
        "availableQuantity": product.available_quantity,
        "originalPrice": product.original_price,
        "discountedPrice": product.discounted_price,
        "discountPercentage": product.discount_percentage,
        "quantity": product.quantity,
        "lineTotal": product.line_total,
        "canOrder": product.can_order,
    }


class MapController:
    """Routes map interactions to the cart, the catalog and the order submitter."""

    def __init__(self, cart: CartState, catalog: CatalogFetcher, orders: OrderSubmitter):
        self.cart = cart
        self.catalog = catalog
        self.orders = orders

    @property
    def markers(self) -> list[Marker]:
        return markers_for(self.cart)

    def popup(self, product_id: str) -> dict | None:
        product = self.cart.get(product_id)
        return popup_for(product) if product else None

    def on_increment(self, product_id: str) -> bool:
        return self.cart.increment(product_id)

    def on_decrement(self, product_id: str) -> bool:
        return self.cart.decrement(product_id)

    async def on_chip(self, category_id: str) -> bool:
        return await self.catalog.select_chip(category_id)

    async def on_place_order(self, product_id: str) -> OrderAttempt | None:
        """Returns None when the order button is disabled for this product."""
        product = self.cart.get(product_id)
        if product is None or not product.can_order:
            return None
        return await self.orders.submit(product)
