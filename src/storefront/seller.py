"""Seller's own catalog: list their products and add new ones."""

from storefront.api import MarketplaceClient
from storefront.catalog import CatalogFetcher
from storefront.errors import FormValidationError, StorefrontError
from storefront.forms import ProductForm, validate_form
from storefront.notices import NoticeBoard
from storefront.session import Session
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class SellerCatalog:
    def __init__(self, client: MarketplaceClient, session: Session, catalog: CatalogFetcher, notices: NoticeBoard):
        self.client = client
        self.session = session
        self.catalog = catalog
        self.notices = notices

    @property
    def products(self):
        return self.catalog.seller_products

    async def refresh(self) -> bool:
        return await self.catalog.fetch_seller_products()

    async def add_product(self, data: dict) -> str | None:
        """Validate and list a product. Returns its id, or None when rejected."""
        if not self.session.is_seller:
            self.notices.error("Only sellers can add products")
            return None

        try:
            form = validate_form(ProductForm, data)
        except FormValidationError as exc:
            self.notices.error(str(exc))
            return None

        try:
            response = await self.client.create_product(form.to_payload(self.session.user_id))
        except StorefrontError as exc:
            self.notices.error(str(exc))
            return None

        self.notices.success(response.get("message") or "Product added")
        logger.info("product_added", product_id=response.get("id"), seller_id=self.session.user_id)
        await self.refresh()
        return response.get("id")
