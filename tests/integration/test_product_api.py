"""Integration tests for Product API endpoints.

Covers:
- CRUD operations via /api/v1/products/.
- Soft delete semantics seen through the API.
- Domain exception mapping (404, 400).
- The create / list / remove / fetch scenario end to end.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product

pytestmark = pytest.mark.integration

BASE_URL = "/api/v1/products/"


def _detail_url(product_id) -> str:
    return f"{BASE_URL}{product_id}/"


@pytest.fixture()
def sample_product(make_product):
    """A persisted Product instance."""
    return make_product(name="Widget Alpha", price=Decimal("19.99"))


# ===========================================================================
# Create
# ===========================================================================


class TestProductAPICreate:
    def test_create_product(self, api_client):
        response = api_client.post(
            BASE_URL, {"name": "New Widget", "price": "29.99"}, format="json"
        )

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "New Widget"
        assert data["price"] == 29.99
        assert data["deletedAt"] is None
        assert isinstance(data["id"], int)
        assert Product.objects.filter(id=data["id"]).exists()

    def test_create_accepts_numeric_price(self, api_client):
        response = api_client.post(BASE_URL, {"name": "Pen", "price": 1.5}, format="json")
        assert response.status_code == 201
        assert response.json()["price"] == 1.5

    def test_create_allows_duplicate_names(self, api_client, sample_product):
        response = api_client.post(
            BASE_URL, {"name": sample_product.name, "price": "1.00"}, format="json"
        )
        assert response.status_code == 201
        assert response.json()["id"] != sample_product.id

    @pytest.mark.parametrize(
        "payload, attr",
        [
            ({"price": "1.00"}, "name"),
            ({"name": "", "price": "1.00"}, "name"),
            ({"name": "Pen"}, "price"),
            ({"name": "Pen", "price": "abc"}, "price"),
            ({"name": "Pen", "price": "-1"}, "price"),
            ({"name": "Pen", "price": "1.12345"}, "price"),
        ],
    )
    def test_create_invalid_payload_returns_400(self, api_client, payload, attr):
        response = api_client.post(BASE_URL, payload, format="json")

        assert response.status_code == 400
        body = response.json()
        assert body["type"] == "validation_error"
        assert attr in [error["attr"] for error in body["errors"]]
        assert Product.objects.count() == 0

    @pytest.mark.parametrize("body", [[1, 2], "hello", 42])
    def test_create_non_object_body_returns_400(self, api_client, body):
        response = api_client.post(BASE_URL, body, format="json")

        assert response.status_code == 400
        data = response.json()
        assert data["type"] == "validation_error"
        assert data["errors"][0]["code"] == "invalid"
        assert data["errors"][0]["attr"] is None
        assert Product.objects.count() == 0


# ===========================================================================
# List
# ===========================================================================


class TestProductAPIList:
    def test_list_products(self, api_client, sample_product):
        response = api_client.get(BASE_URL)

        assert response.status_code == 200
        body = response.json()
        assert [item["id"] for item in body["data"]] == [sample_product.id]
        assert body["meta"] == {"total": 1, "page": 1, "lastPage": 1}

    def test_list_excludes_soft_deleted(self, api_client, make_product):
        kept = make_product(name="Kept")
        make_product(name="Gone").delete()

        body = api_client.get(BASE_URL).json()

        assert [item["id"] for item in body["data"]] == [kept.id]
        assert body["meta"]["total"] == 1

    def test_list_empty(self, api_client):
        body = api_client.get(BASE_URL).json()
        assert body == {"data": [], "meta": {"total": 0, "page": 1, "lastPage": 0}}


# ===========================================================================
# Retrieve
# ===========================================================================


class TestProductAPIRetrieve:
    def test_retrieve_product(self, api_client, sample_product):
        response = api_client.get(_detail_url(sample_product.id))

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == sample_product.id
        assert data["name"] == "Widget Alpha"
        assert set(data) == {"id", "name", "price", "createdAt", "updatedAt", "deletedAt"}

    def test_retrieve_nonexistent_returns_404(self, api_client):
        response = api_client.get(_detail_url(99999))

        assert response.status_code == 404
        assert response.json() == {
            "type": "client_error",
            "errors": [
                {
                    "code": "not_found",
                    "detail": "Product with ID 99999 not found",
                    "attr": None,
                }
            ],
        }

    def test_retrieve_soft_deleted_returns_404(self, api_client, sample_product):
        sample_product.delete()
        response = api_client.get(_detail_url(sample_product.id))
        assert response.status_code == 404

    def test_non_numeric_id_does_not_route(self, api_client):
        response = api_client.get(_detail_url("abc"))
        assert response.status_code == 404

    def test_id_beyond_column_range_returns_400(self, api_client):
        response = api_client.get(_detail_url(2**70))

        assert response.status_code == 400
        assert response.json()["errors"][0]["attr"] == "id"

    def test_zero_id_returns_400(self, api_client):
        response = api_client.get(_detail_url(0))
        assert response.status_code == 400


# ===========================================================================
# Update
# ===========================================================================


class TestProductAPIUpdate:
    def test_patch_name(self, api_client, sample_product):
        response = api_client.patch(
            _detail_url(sample_product.id), {"name": "Renamed"}, format="json"
        )

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == sample_product.id
        assert data["name"] == "Renamed"
        assert data["price"] == 19.99

    def test_put_both_fields(self, api_client, sample_product):
        response = api_client.put(
            _detail_url(sample_product.id),
            {"name": "Replaced", "price": "5.0000"},
            format="json",
        )

        assert response.status_code == 200
        sample_product.refresh_from_db()
        assert sample_product.name == "Replaced"
        assert sample_product.price == Decimal("5")

    def test_id_in_body_is_ignored(self, api_client, sample_product):
        response = api_client.patch(
            _detail_url(sample_product.id), {"id": 999, "name": "X"}, format="json"
        )
        assert response.status_code == 200
        assert response.json()["id"] == sample_product.id

    def test_update_nonexistent_returns_404(self, api_client):
        response = api_client.patch(_detail_url(99999), {"name": "X"}, format="json")
        assert response.status_code == 404

    def test_update_soft_deleted_returns_404(self, api_client, sample_product):
        sample_product.delete()
        response = api_client.patch(
            _detail_url(sample_product.id), {"name": "X"}, format="json"
        )
        assert response.status_code == 404

    def test_update_negative_price_returns_400(self, api_client, sample_product):
        response = api_client.patch(
            _detail_url(sample_product.id), {"price": "-3"}, format="json"
        )
        assert response.status_code == 400
        sample_product.refresh_from_db()
        assert sample_product.price == Decimal("19.99")

    @pytest.mark.parametrize("body", [["name", "X"], "hello"])
    def test_update_non_object_body_returns_400(self, api_client, sample_product, body):
        response = api_client.patch(_detail_url(sample_product.id), body, format="json")

        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "invalid"
        sample_product.refresh_from_db()
        assert sample_product.name == "Widget Alpha"

    def test_update_id_beyond_column_range_returns_400(self, api_client):
        response = api_client.patch(_detail_url(2**63), {"name": "X"}, format="json")
        assert response.status_code == 400
        assert response.json()["errors"][0]["attr"] == "id"


# ===========================================================================
# Delete
# ===========================================================================


class TestProductAPIDelete:
    def test_delete_soft_deletes(self, api_client, sample_product):
        response = api_client.delete(_detail_url(sample_product.id))

        assert response.status_code == 200
        assert response.json()["deletedAt"] is not None
        sample_product.refresh_from_db()
        assert sample_product.deleted_at is not None
        assert Product.objects.filter(id=sample_product.id).exists()

    def test_delete_twice_returns_404(self, api_client, sample_product):
        api_client.delete(_detail_url(sample_product.id))
        response = api_client.delete(_detail_url(sample_product.id))
        assert response.status_code == 404

    def test_delete_nonexistent_returns_404(self, api_client):
        response = api_client.delete(_detail_url(99999))
        assert response.status_code == 404

    def test_delete_id_beyond_column_range_returns_400(self, api_client):
        response = api_client.delete(_detail_url(2**70))
        assert response.status_code == 400


# ===========================================================================
# Scenario
# ===========================================================================


class TestProductLifecycleScenario:
    def test_create_list_remove_fetch(self, api_client):
        created = api_client.post(BASE_URL, {"name": "Pen", "price": 1.5}, format="json")
        assert created.status_code == 201
        product_id = created.json()["id"]

        listing = api_client.get(BASE_URL, {"page": 1, "limit": 10}).json()
        assert [item["name"] for item in listing["data"]] == ["Pen"]
        assert listing["meta"] == {"total": 1, "page": 1, "lastPage": 1}

        removed = api_client.delete(_detail_url(product_id))
        assert removed.status_code == 200
        assert removed.json()["deletedAt"] is not None

        fetched = api_client.get(_detail_url(product_id))
        assert fetched.status_code == 404
        assert fetched.json()["errors"][0]["detail"] == f"Product with ID {product_id} not found"
