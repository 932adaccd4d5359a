"""Order aggregate: one buyer booking a quantity of one discounted product."""

from datetime import datetime
from enum import Enum

from protean.fields import DateTime, Float, Identifier, Integer, String

from marketplace.domain import marketplace


class OrderStatus(Enum):
    PLACED = "Placed"


class PaymentMethod(Enum):
    CASH = "Cash"


@marketplace.aggregate
class Order:
    """A booking made from a map popup.

    The price is the one the buyer saw (``quantity * discountedPrice``).
    Placing an order does not touch product stock.
    """

    booked_by_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)
    price: Float(required=True, min_value=0.0)
    payment_method: String(choices=PaymentMethod, default=PaymentMethod.CASH.value)
    status: String(choices=OrderStatus, default=OrderStatus.PLACED.value)
    placed_at: DateTime(default=datetime.now)

    @classmethod
    def place(cls, booked_by_id, product_id, quantity, price, payment_method=None):
        from marketplace.order.events import OrderPlaced

        now = datetime.now()
        order = cls(
            booked_by_id=booked_by_id,
            product_id=product_id,
            quantity=quantity,
            price=price,
            payment_method=payment_method or PaymentMethod.CASH.value,
            placed_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=order.id,
                booked_by_id=booked_by_id,
                product_id=product_id,
                quantity=quantity,
                price=order.price,
                payment_method=order.payment_method,
                placed_at=now,
            )
        )
        return order
