"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Order")
class OrderPlaced:
    __version__ = 1

    order_id: Identifier(required=True)
    booked_by_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(required=True)
    price: Float(required=True)
    payment_method: String(required=True)
    placed_at: DateTime(required=True)
