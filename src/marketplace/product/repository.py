"""Repository for the Product aggregate."""

from protean.exceptions import ObjectNotFoundError

from marketplace.domain import marketplace
from marketplace.product.product import Product


@marketplace.repository(part_of=Product)
class ProductRepository:
    """Query methods the storefront relies on, on top of the standard CRUD."""

    def find_all(self) -> list[Product]:
        return self._dao.query.all().items

    def find_by_seller(self, seller_id: str) -> list[Product]:
        return self._dao.query.filter(seller_id=seller_id).all().items

    def find_by_name(self, name: str, exclude_seller_id: str | None = None) -> list[Product]:
        """Products listed under exactly ``name``, optionally hiding one seller's own listings."""
        products = self._dao.query.filter(name=name).all().items
        if exclude_seller_id:
            products = [p for p in products if str(p.seller_id) != str(exclude_seller_id)]
        return products

    def find_by_ids(self, product_ids: list[str]) -> list[Product]:
        """Products for the given ids, in the order asked for. Unknown ids are skipped."""
        found = []
        for product_id in product_ids:
            try:
                found.append(self.get(product_id))
            except ObjectNotFoundError:
                continue
        return found
