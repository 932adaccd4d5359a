"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from pytest_bdd import given, parsers, then
from storefront.map_view import MapController
from storefront.models import Product


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def outcome():
    """Container for the last order attempt."""
    return {"attempt": None}


@pytest.fixture()
def controller(cart, catalog, submitter):
    return MapController(cart, catalog, submitter)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{product_id}" with {available:d} units available'))
def product_on_map(cart, card, product_id, available):
    cart.replace([Product.model_validate(card(product_id, available=available))])


@given(
    parsers.cfparse(
        'a product "{product_id}" with {available:d} units available at a discounted price of {price:d}'
    )
)
def priced_product_on_map(cart, card, product_id, available, price):
    cart.replace([Product.model_validate(card(product_id, available=available, discounted=float(price)))])


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the quantity of "{product_id}" is {quantity:d}'))
def quantity_is(cart, product_id, quantity):
    assert cart.get(product_id).quantity == quantity
