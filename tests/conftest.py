from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def seeded_products():
    """Two persisted products with known ids and stock levels."""
    return [
        Product.objects.create(
            id=100001,
            name="Product1",
            description="Description1",
            price=Decimal("10.00"),
            stock_available=100,
        ),
        Product.objects.create(
            id=100002,
            name="Product2",
            description="Description2",
            price=Decimal("20.00"),
            stock_available=200,
        ),
    ]
