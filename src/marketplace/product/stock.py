"""Stock updates: command and handler."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from marketplace.domain import logger, marketplace
from marketplace.product.product import Product


@marketplace.command(part_of="Product")
class UpdateProductStock:
    """Overwrite a product's available quantity with an absolute value."""

    product_id: Identifier(required=True)
    available_quantity: Integer(required=True)


@marketplace.command_handler(part_of=Product)
class UpdateProductStockHandler:
    @handle(UpdateProductStock)
    def update_stock(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.update_stock(command.available_quantity)
        repo.add(product)
        logger.info(
            "product_stock_updated",
            product_id=str(product.id),
            available_quantity=product.available_quantity,
        )
        return product
