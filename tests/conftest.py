from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.products import lifecycle
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService


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
def make_product():
    """Factory persisting a Product straight through the ORM."""

    def _make(**overrides) -> Product:
        defaults = {"name": "Widget", "price": Decimal("19.99")}
        defaults.update(overrides)
        return Product.objects.create(**defaults)

    return _make


@pytest.fixture()
def product_service():
    """ProductService over the real Django repository."""
    return ProductService(repository=ProductDjangoRepository())


@pytest.fixture()
def running_service():
    """Process-wide product service, as a Celery worker would start it."""
    lifecycle.shutdown()
    service = lifecycle.startup()
    yield service
    lifecycle.shutdown()
