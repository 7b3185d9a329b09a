"""
Imoveis tests - API
"""

import pytest
from fastapi.testclient import TestClient

from imoveis.api.main import app
from imoveis.data_sources.store import (
    InMemoryListingStore,
    ListingStoreError,
    get_listing_store,
)

from factories import scenario_listings


class TestSearchAPI:
    """Routes over an in-memory store"""

    def setup_method(self):
        store = InMemoryListingStore(scenario_listings())
        app.dependency_overrides[get_listing_store] = lambda: store
        self.client = TestClient(app)

    def teardown_method(self):
        app.dependency_overrides.clear()

    def test_health(self):
        assert self.client.get("/").json()["status"] == "running"
        assert self.client.get("/health").json()["status"] == "healthy"

    def test_search(self):
        response = self.client.post(
            "/api/v1/search", json={"criteria": {"listing_kind": "sale"}}
        )

        assert response.status_code == 200
        body = response.json()
        assert [item["id"] for item in body["items"]] == ["L1", "L2"]
        assert body["total_count"] == 2
        assert body["has_next"] is False

    def test_search_without_criteria(self):
        response = self.client.post("/api/v1/search", json={"page_size": 2})

        body = response.json()
        assert [item["id"] for item in body["items"]] == ["L1", "L2"]
        assert body["has_next"] is True

    def test_search_rejects_unknown_field(self):
        response = self.client.post(
            "/api/v1/search", json={"criteria": {"bedrooms": 2}}
        )

        assert response.status_code == 422

    def test_featured_and_recent(self):
        featured = self.client.get("/api/v1/featured", params={"limit": 1}).json()
        recent = self.client.get("/api/v1/recent").json()

        assert [item["id"] for item in featured] == ["L1"]
        assert [item["id"] for item in recent] == ["L1", "L2", "L3"]

    def test_get_listing(self):
        response = self.client.get("/api/v1/listings/L3")

        assert response.status_code == 200
        assert response.json()["listing_kind"] == "rent"

    def test_get_unknown_listing(self):
        response = self.client.get("/api/v1/listings/nope")

        assert response.status_code == 404

    def test_explain(self):
        response = self.client.post(
            "/api/v1/listings/L2/explain", json={"max_price": 15000000}
        )

        body = response.json()
        assert body["status"] == "fail"
        assert body["failed_conditions"] == ["max_price"]

    def test_toggle_cascades_to_city(self):
        response = self.client.post(
            "/api/v1/criteria/toggle",
            json={
                "criteria": {"province": "maputo", "city": "matola"},
                "field": "province",
                "value": "gaza",
            },
        )

        body = response.json()
        assert body["province"] == "gaza"
        assert body["city"] is None

    def test_toggle_invalid_value(self):
        response = self.client.post(
            "/api/v1/criteria/toggle",
            json={"field": "property_kind", "value": "castle"},
        )

        assert response.status_code == 422

    def test_toggle_amenity(self):
        response = self.client.post(
            "/api/v1/criteria/amenities/toggle",
            json={"criteria": {}, "amenity": "pool"},
        )

        assert response.json()["required_amenities"] == ["pool"]

    def test_catalog_and_schema(self):
        catalog = self.client.get("/api/v1/catalog").json()
        schema = self.client.get("/api/v1/schema/criteria").json()

        assert "maputo" in catalog["cities"]
        assert "required_amenities" in schema["properties"]


class TestStoreFailure:

    def teardown_method(self):
        app.dependency_overrides.clear()

    def test_store_error_maps_to_500(self):
        def broken_store():
            raise ListingStoreError("seed missing")

        app.dependency_overrides[get_listing_store] = broken_store
        client = TestClient(app)

        response = client.get("/api/v1/featured")

        assert response.status_code == 500
        assert response.json()["detail"] == "Listing store unavailable"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
