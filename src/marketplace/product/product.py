"""Product aggregate root: a discounted food listing with server-authoritative stock."""

from datetime import datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, Date, DateTime, Float, Identifier, Integer, String, Text

from marketplace.domain import marketplace


class ProductStatus(Enum):
    """Enumeration of listing statuses."""

    ACTIVE = "active"
    SOLD_OUT = "sold-out"
    EXPIRED = "expired"
    DRAFT = "draft"
    UNAVAILABLE = "unavailable"


def derive_discount_percentage(original_price, discounted_price):
    """Percentage off the original price, or 0 when there is no original price."""
    if not original_price:
        return 0.0
    return round((original_price - (discounted_price or 0)) / original_price * 100, 2)


@marketplace.aggregate
class Product:
    """Product aggregate root."""

    name: String(required=True, max_length=100)
    description: Text()
    category_id: Identifier()
    seller_id: Identifier()
    original_price: Float(required=True, min_value=0.0)
    discounted_price: Float(required=True, min_value=0.0)
    discount_percentage: Float(min_value=0.0, max_value=100.0, default=0.0)
    available_quantity: Integer(min_value=0, default=0)
    expiry_date: Date()
    is_available: Boolean(default=True)
    status: String(choices=ProductStatus, default=ProductStatus.ACTIVE.value)
    image_name: String(max_length=255)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def discounted_price_cannot_exceed_original(self):
        if self.discounted_price is None or self.original_price is None:
            return
        if self.discounted_price > self.original_price:
            raise ValidationError({"discounted_price": ["Must be ≤ original price"]})

    @classmethod
    def create(
        cls,
        name,
        original_price,
        discounted_price,
        available_quantity,
        seller_id=None,
        category_id=None,
        description=None,
        discount_percentage=None,
        expiry_date=None,
        is_available=True,
        status=None,
        image_name=None,
    ):
        from marketplace.product.events import ProductListed

        if discount_percentage is None:
            discount_percentage = derive_discount_percentage(original_price, discounted_price)

        now = datetime.now()
        product = cls(
            name=name,
            description=description,
            category_id=category_id,
            seller_id=seller_id,
            original_price=original_price,
            discounted_price=discounted_price,
            discount_percentage=discount_percentage,
            available_quantity=available_quantity,
            expiry_date=expiry_date,
            is_available=is_available,
            status=status or ProductStatus.ACTIVE.value,
            image_name=image_name,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductListed(
                product_id=product.id,
                seller_id=seller_id,
                category_id=category_id,
                name=name,
                discounted_price=product.discounted_price,
                available_quantity=available_quantity,
                listed_at=now,
            )
        )
        return product

    def update_stock(self, available_quantity):
        """Overwrite the available stock with an absolute value.

        Reaching zero marks the listing sold out; restocking a sold-out listing
        makes it active again.
        """
        from marketplace.product.events import ProductStockUpdated

        if available_quantity is None or available_quantity < 0:
            raise ValidationError({"availableQuantity": ["Available quantity cannot be negative"]})

        previous = self.available_quantity
        self.available_quantity = available_quantity

        if available_quantity == 0:
            self.status = ProductStatus.SOLD_OUT.value
            self.is_available = False
        elif self.status == ProductStatus.SOLD_OUT.value:
            self.status = ProductStatus.ACTIVE.value
            self.is_available = True

        self.updated_at = datetime.now()

        self.raise_(
            ProductStockUpdated(
                product_id=self.id,
                previous_quantity=previous,
                new_quantity=available_quantity,
                updated_at=self.updated_at,
            )
        )

    def can_fulfil(self, quantity) -> bool:
        return quantity <= self.available_quantity
