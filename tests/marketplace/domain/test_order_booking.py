"""Tests for the Order aggregate root."""

import pytest
from marketplace.order.events import OrderPlaced
from marketplace.order.order import Order, OrderStatus, PaymentMethod
from protean.exceptions import ValidationError


class TestOrderPlacement:
    def test_place(self):
        order = Order.place(booked_by_id="u-1", product_id="p-1", quantity=3, price=300.0)
        assert order.status == OrderStatus.PLACED.value
        assert order.payment_method == PaymentMethod.CASH.value
        assert order.placed_at is not None

    def test_raises_placed_event(self):
        order = Order.place(booked_by_id="u-1", product_id="p-1", quantity=3, price=300.0)
        event = order._events[0]
        assert isinstance(event, OrderPlaced)
        assert event.quantity == 3
        assert event.price == 300.0

    def test_quantity_must_be_positive(self):
        with pytest.raises(ValidationError):
            Order.place(booked_by_id="u-1", product_id="p-1", quantity=0, price=0.0)

    def test_unknown_payment_method_rejected(self):
        with pytest.raises(ValidationError):
            Order.place(booked_by_id="u-1", product_id="p-1", quantity=1, price=10.0, payment_method="Card")
