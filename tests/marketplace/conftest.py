import pytest


@pytest.fixture(autouse=True)
def run_around_tests(marketplace_ctx):
    """Every marketplace test runs inside a fresh domain context."""
    yield
