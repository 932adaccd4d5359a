"""Fixtures for end-to-end tests: storefront clients talking to the API in-process."""

import httpx
import pytest
from storefront.config import StorefrontConfig
from storefront.storefront import Storefront


@pytest.fixture(autouse=True)
def run_around_tests(marketplace_ctx):
    yield


@pytest.fixture()
def make_storefront(api_app, tmp_path):
    """Build a storefront with its own session file, routed to the API over ASGI."""
    created = []

    def _make(name):
        config = StorefrontConfig(api_url="http://marketplace.test", session_file=tmp_path / f"{name}.json")
        front = Storefront(config, transport=httpx.ASGITransport(app=api_app))
        created.append(front)
        return front

    return _make
