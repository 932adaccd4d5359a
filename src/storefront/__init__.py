from storefront.api import MarketplaceClient
from storefront.cart import CartState
from storefront.catalog import CatalogFetcher
from storefront.config import StorefrontConfig
from storefront.errors import FormValidationError, ServerReportedError, StorefrontError, TransportFailure
from storefront.models import Category, OrderIntent, Product
from storefront.orders import OrderAttempt, OrderState, OrderSubmitter
from storefront.session import Session, SessionStore
from storefront.storefront import Storefront

__all__ = [
    "CartState",
    "CatalogFetcher",
    "Category",
    "FormValidationError",
    "MarketplaceClient",
    "OrderAttempt",
    "OrderIntent",
    "OrderState",
    "OrderSubmitter",
    "Product",
    "ServerReportedError",
    "Session",
    "SessionStore",
    "Storefront",
    "StorefrontConfig",
    "StorefrontError",
    "TransportFailure",
]
