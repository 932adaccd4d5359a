"""Catalog entities as the storefront sees them.

Products carry one client-only field, ``quantity``: how many units the buyer
intends to order. Everything else mirrors the API payload.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


class Coords(BaseModel):
    lat: float
    lng: float


class SellerRef(BaseModel):
    model_config = _CAMEL

    id: str | None = Field(None, alias="_id")
    name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    coords: Coords | None = None


class CategoryRef(BaseModel):
    model_config = _CAMEL

    id: str | None = Field(None, alias="_id")
    name: str | None = None
    emoji: str | None = None


class Category(BaseModel):
    model_config = _CAMEL

    id: str | None = Field(None, alias="_id")
    name: str
    emoji: str | None = None
    product_ids: list[str] = Field(default_factory=list, alias="product_ids")


class Product(BaseModel):
    model_config = _CAMEL

    id: str = Field(alias="_id")
    name: str
    description: str | None = None
    original_price: float = 0.0
    discounted_price: float = 0.0
    discount_percentage: float = 0.0
    available_quantity: int = 0
    quantity: int = 1
    status: str | None = None
    is_available: bool = True
    category: CategoryRef | None = None
    seller: SellerRef | None = Field(None, alias="sellerId")

    @property
    def line_total(self) -> float:
        return self.discounted_price * self.quantity

    @property
    def can_order(self) -> bool:
        return self.available_quantity >= 1

    @property
    def coords(self) -> Coords | None:
        return self.seller.coords if self.seller else None


class OrderIntent(BaseModel):
    """Body of ``POST /orders``."""

    model_config = _CAMEL

    booked_by_id: str | None
    product_id: str
    quantity: int
    price: float
    payment_method: str = "Cash"

    @classmethod
    def for_product(cls, product: Product, buyer_id: str | None, payment_method: str = "Cash") -> OrderIntent:
        return cls(
            booked_by_id=buyer_id,
            product_id=product.id,
            quantity=product.quantity,
            price=product.quantity * product.discounted_price,
            payment_method=payment_method,
        )
