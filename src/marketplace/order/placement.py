"""Order placement: command and handler.

Stock is checked but not decremented here; the client follows a successful
order with its own stock update.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from marketplace.domain import logger, marketplace
from marketplace.order.order import Order
from marketplace.product.product import Product


@marketplace.command(part_of="Order")
class PlaceOrder:
    booked_by_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(required=True)
    price: Float(required=True)
    payment_method: String(max_length=20)


@marketplace.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        if command.quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        product = current_domain.repository_for(Product).get(command.product_id)
        if not product.can_fulfil(command.quantity):
            logger.info(
                "order_rejected_out_of_stock",
                product_id=str(product.id),
                requested=command.quantity,
                available=product.available_quantity,
            )
            raise ValidationError({"quantity": ["Out of stock"]})

        order = Order.place(
            booked_by_id=command.booked_by_id,
            product_id=command.product_id,
            quantity=command.quantity,
            price=command.price,
            payment_method=command.payment_method,
        )
        current_domain.repository_for(Order).add(order)
        logger.info("order_placed", order_id=str(order.id), product_id=str(command.product_id))
        return str(order.id)
