"""Read-side rendering of products with their category and seller embedded.

The storefront places a marker per product at the seller's coordinates and
labels it with the category emoji, so both references are resolved here.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.category.category import Category
from marketplace.product.product import Product
from marketplace.user.user import User


def _category_ref(category_id) -> dict | None:
    if not category_id:
        return None
    try:
        category = current_domain.repository_for(Category).get(category_id)
    except ObjectNotFoundError:
        return None
    return {"_id": str(category.id), "name": category.name, "emoji": category.emoji}


def _seller_ref(seller_id) -> dict | None:
    if not seller_id:
        return None
    try:
        seller = current_domain.repository_for(User).get(seller_id)
    except ObjectNotFoundError:
        return None
    return {
        "_id": str(seller.id),
        "name": seller.name,
        "email": seller.email,
        "phoneNumber": seller.phone_number,
        "coords": seller.coords,
    }


def product_card(product: Product) -> dict:
    """Render a product the way the storefront consumes it."""
    return {
        "_id": str(product.id),
        "name": product.name,
        "description": product.description,
        "originalPrice": product.original_price,
        "discountedPrice": product.discounted_price,
        "discountPercentage": product.discount_percentage,
        "availableQuantity": product.available_quantity,
        "expiryDate": product.expiry_date.isoformat() if product.expiry_date else None,
        "isAvailable": product.is_available,
        "status": product.status,
        "imageName": product.image_name,
        "category": _category_ref(product.category_id),
        "sellerId": _seller_ref(product.seller_id),
    }


def product_cards(products: list[Product]) -> list[dict]:
    return [product_card(p) for p in products]
