"""Order submission: place the order, decrement stock, refresh the catalog.

The two writes are independent requests. When the order is accepted but the
stock update fails, the order stands and the attempt ends in
``STOCK_UPDATE_FAILED``; there is no compensating request.
"""

from dataclasses import dataclass, field
from enum import Enum

from storefront.api import MarketplaceClient
from storefront.catalog import CatalogFetcher
from storefront.errors import MalformedResponse, ServerReportedError, StorefrontError
from storefront.models import OrderIntent, Product
from storefront.notices import NoticeBoard
from storefront.session import Session
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

FAILED_ORDER_MESSAGE = "Failed to place order"
PLACED_ORDER_MESSAGE = "Order placed!"


class OrderState(Enum):
    IDLE = "Idle"
    SUBMITTING = "Submitting"
    PLACED = "Placed"
    FAILED = "Failed"
    STOCK_UPDATE_PENDING = "StockUpdatePending"
    STOCK_UPDATED = "StockUpdated"
    STOCK_UPDATE_FAILED = "StockUpdateFailed"


TRANSITIONS: dict[OrderState, set[OrderState]] = {
    OrderState.IDLE: {OrderState.SUBMITTING},
    OrderState.SUBMITTING: {OrderState.PLACED, OrderState.FAILED},
    OrderState.PLACED: {OrderState.STOCK_UPDATE_PENDING},
    OrderState.STOCK_UPDATE_PENDING: {OrderState.STOCK_UPDATED, OrderState.STOCK_UPDATE_FAILED},
    OrderState.FAILED: set(),
    OrderState.STOCK_UPDATED: set(),
    OrderState.STOCK_UPDATE_FAILED: set(),
}


class InvalidTransition(Exception):
    pass


@dataclass
class OrderAttempt:
    """One click of "place order". Never reused."""

    intent: OrderIntent
    stock_before: int
    state: OrderState = OrderState.IDLE
    message: str | None = None
    history: list[OrderState] = field(default_factory=list)

    def advance(self, new_state: OrderState) -> None:
        if new_state not in TRANSITIONS[self.state]:
            raise InvalidTransition(f"{self.state.value} -> {new_state.value}")
        self.history.append(self.state)
        self.state = new_state

    @property
    def remaining_stock(self) -> int:
        return self.stock_before - self.intent.quantity


class OrderSubmitter:
    def __init__(
        self,
        client: MarketplaceClient,
        session: Session,
        catalog: CatalogFetcher,
        notices: NoticeBoard,
        payment_method: str = "Cash",
    ):
        self.client = client
        self.session = session
        self.catalog = catalog
        self.notices = notices
        self.payment_method = payment_method

    async def submit(self, product: Product) -> OrderAttempt:
        # Quantity, price and stock are captured now; later cart edits do not leak in.
        attempt = OrderAttempt(
            intent=OrderIntent.for_product(product, self.session.user_id, self.payment_method),
            stock_before=product.available_quantity,
        )
        attempt.advance(OrderState.SUBMITTING)

        try:
            response = await self.client.place_order(attempt.intent.model_dump(by_alias=True))
        except MalformedResponse as exc:
            # A 2xx answer means the order was accepted.
            logger.warning("order_response_unreadable", product_id=product.id, error=str(exc))
            response = {}
        except StorefrontError as exc:
            message = exc.message if isinstance(exc, ServerReportedError) and exc.message else FAILED_ORDER_MESSAGE
            attempt.advance(OrderState.FAILED)
            attempt.message = message
            self.notices.error(message)
            logger.warning("order_failed", product_id=product.id, error=str(exc))
            return attempt

        attempt.advance(OrderState.PLACED)
        attempt.message = response.get("message") or PLACED_ORDER_MESSAGE
        self.notices.success(attempt.message)
        logger.info(
            "order_placed",
            product_id=product.id,
            quantity=attempt.intent.quantity,
            price=attempt.intent.price,
        )

        attempt.advance(OrderState.STOCK_UPDATE_PENDING)
        try:
            await self.client.update_stock(product.id, attempt.remaining_stock)
        except MalformedResponse as exc:
            logger.warning("stock_update_response_unreadable", product_id=product.id, error=str(exc))
            attempt.advance(OrderState.STOCK_UPDATED)
        except StorefrontError as exc:
            attempt.advance(OrderState.STOCK_UPDATE_FAILED)
            logger.warning(
                "stock_update_failed",
                product_id=product.id,
                intended_stock=attempt.remaining_stock,
                error=str(exc),
            )
        else:
            attempt.advance(OrderState.STOCK_UPDATED)

        await self.catalog.fetch_by_preferences()
        return attempt
