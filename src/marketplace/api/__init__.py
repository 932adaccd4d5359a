"""Marketplace API package."""

from marketplace.api.context import domain_context_middleware
from marketplace.api.errors import register_exception_handlers
from marketplace.api.routes import category_router, order_router, product_router, user_router

__all__ = [
    "category_router",
    "domain_context_middleware",
    "order_router",
    "product_router",
    "register_exception_handlers",
    "user_router",
]
