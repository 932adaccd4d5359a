"""Product listing: command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, Date, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from marketplace.category.category import Category
from marketplace.domain import logger, marketplace
from marketplace.product.product import Product
from marketplace.user.user import User


@marketplace.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=100)
    description: Text()
    category_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    original_price: Float(required=True)
    discounted_price: Float(required=True)
    discount_percentage: Float()
    available_quantity: Integer(required=True)
    expiry_date: Date()
    is_available: Boolean(default=True)
    status: String(max_length=20)
    image_name: String(max_length=255)


@marketplace.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        try:
            seller = current_domain.repository_for(User).get(command.seller_id)
        except ObjectNotFoundError:
            raise ValidationError({"sellerId": ["Seller not found"]}) from None
        if not seller.is_seller:
            raise ValidationError({"sellerId": ["Only sellers can add products"]})

        category_repo = current_domain.repository_for(Category)
        try:
            category = category_repo.get(command.category_id)
        except ObjectNotFoundError:
            raise ValidationError({"category": ["Category not found"]}) from None

        product = Product.create(
            name=command.name,
            description=command.description,
            category_id=command.category_id,
            seller_id=command.seller_id,
            original_price=command.original_price,
            discounted_price=command.discounted_price,
            discount_percentage=command.discount_percentage,
            available_quantity=command.available_quantity,
            expiry_date=command.expiry_date,
            is_available=command.is_available,
            status=command.status,
            image_name=command.image_name,
        )
        current_domain.repository_for(Product).add(product)

        category.add_product(product.id)
        category_repo.add(category)

        logger.info("product_listed", product_id=str(product.id), seller_id=str(command.seller_id))
        return str(product.id)
