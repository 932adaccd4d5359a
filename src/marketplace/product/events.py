"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Product")
class ProductListed:
    """A seller put a discounted product on the marketplace."""

    __version__ = 1

    product_id: Identifier(required=True)
    seller_id: Identifier()
    category_id: Identifier()
    name: String(required=True)
    discounted_price: Float(required=True)
    available_quantity: Integer(required=True)
    listed_at: DateTime(required=True)


@marketplace.event(part_of="Product")
class ProductStockUpdated:
    """Available stock was overwritten, usually after an order was placed."""

    __version__ = 1

    product_id: Identifier(required=True)
    previous_quantity: Integer(required=True)
    new_quantity: Integer(required=True)
    updated_at: DateTime(required=True)
