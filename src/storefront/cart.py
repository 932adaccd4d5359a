"""Per-session list of selectable products with a bounded purchase quantity."""

from collections.abc import Callable, Iterable, Iterator

from storefront.models import Product


class CartState:
    """Holds the products on screen and each one's chosen ``quantity``.

    ``quantity`` stays within ``1..available_quantity`` through increment and
    decrement. A product with no stock keeps ``quantity == 1`` and cannot be
    incremented.
    """

    def __init__(self):
        self._products: list[Product] = []
        self._listeners: list[Callable[["CartState"], None]] = []

    def subscribe(self, listener: Callable[["CartState"], None]) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self)

    def replace(self, products: Iterable[Product]) -> None:
        self._products = [p.model_copy(update={"quantity": 1}) for p in products]
        self._notify()

    def clear(self) -> None:
        self._products = []
        self._notify()

    def get(self, product_id: str) -> Product | None:
        return next((p for p in self._products if p.id == product_id), None)

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    def increment(self, product_id: str) -> bool:
        """Raise the quantity by one. Returns False when nothing changed."""
        product = self.get(product_id)
        if product is None or product.quantity >= product.available_quantity:
            return False
        product.quantity += 1
        self._notify()
        return True

    def decrement(self, product_id: str) -> bool:
        """Lower the quantity by one, never below 1. Returns False when nothing changed."""
        product = self.get(product_id)
        if product is None or product.quantity <= 1:
            return False
        product.quantity -= 1
        self._notify()
        return True

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)
