import pytest
from fastapi.testclient import TestClient

from equipment_search.config import Settings
from equipment_search.sources.equipment_watch import EquipmentWatchAdapter
from equipment_search.sources.mascus import MascusAdapter
from equipment_search.sources.registry import SourceRegistry
from equipment_search.web.server import create_app

from helpers import StaticAdapter

LISTING_FIELDS = {
    "id", "title", "description", "price", "currency", "year", "make", "model", "category",
    "condition", "location", "imageUrls", "sourceUrl", "sourceName", "sourceId",
    "specifications", "createdAt",
}


@pytest.fixture
def client(offline_client, catalog_fallback):
    registry = SourceRegistry([
        EquipmentWatchAdapter(offline_client, catalog_fallback),
        MascusAdapter(offline_client, catalog_fallback),
    ])
    return TestClient(create_app(registry=registry, cfg=Settings(_env_file=None)))


def test_search_returns_sorted_camel_case_listings(client):
    response = client.post("/search-equipment-sources", json={"category": "Excavators"})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    body = response.json()
    assert [item["price"] for item in body] == [65000, 78000, 85000, 92000]
    assert all(set(item) == LISTING_FIELDS for item in body)


def test_search_applies_filters_from_camel_case_body(client):
    response = client.post(
        "/search-equipment-sources",
        json={"make": "CAT", "model": "320D L", "minPrice": 80000, "maxPrice": 90000, "source": ["equipment-watch"]},
    )
    body = response.json()
    assert [(item["id"], item["price"], item["make"]) for item in body] == [("ew-1", 85000, "CAT")]


def test_search_without_terms_is_a_400(client):
    response = client.post("/search-equipment-sources", json={"year": "2019"})
    assert response.status_code == 400
    assert response.json() == {"error": "At least one search parameter is required"}


def test_ill_typed_body_is_a_400(client):
    response = client.post("/search-equipment-sources", json={"query": "dozer", "minPrice": "cheap"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request body"}


def test_internal_failure_is_a_generic_500():
    class BrokenAdapter(StaticAdapter):
        async def fetch(self, query):
            raise RuntimeError("database password is hunter2")

    app = create_app(registry=SourceRegistry([BrokenAdapter("mascus")]), cfg=Settings(_env_file=None))
    response = TestClient(app).post("/search-equipment-sources", json={"query": "dozer"})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_unhandled_route_error_is_a_500_with_cors_headers():
    class BrokenDetails(StaticAdapter):
        async def fetch_details(self, equipment_id):
            raise RuntimeError("connection pool exhausted")

    app = create_app(registry=SourceRegistry([BrokenDetails("mascus")]), cfg=Settings(_env_file=None))
    client = TestClient(app, raise_server_exceptions=False)
    response = client.post("/get-equipment-details", json={"sourceId": "mascus", "equipmentId": "m1"})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert response.headers["access-control-allow-origin"] == "*"


def test_preflight_short_circuits(client):
    response = client.options("/search-equipment-sources", headers={"Origin": "https://app.example.com"})
    assert response.status_code == 204
    assert response.content == b""
    assert "content-type" in response.headers["access-control-allow-headers"]


def test_equipment_details(client):
    response = client.post("/get-equipment-details", json={"sourceId": "mascus", "equipmentId": "mascus-2"})
    assert response.status_code == 200
    assert response.json()["title"] == "Komatsu PC200 Hydraulic Excavator"

    assert client.post("/get-equipment-details", json={"sourceId": "mascus"}).status_code == 400
    invalid = client.post("/get-equipment-details", json={"sourceId": "nope", "equipmentId": "x"})
    assert invalid.json() == {"error": "Invalid source ID"}
    missing = client.post("/get-equipment-details", json={"sourceId": "mascus", "equipmentId": "x"})
    assert missing.status_code == 404


def test_similar_equipment(client):
    response = client.post("/get-similar-equipment", json={"sourceId": "equipment-watch", "equipmentId": "ew-1", "limit": 2})
    body = response.json()
    assert response.status_code == 200
    assert len(body) == 2
    assert all(not (item["sourceId"] == "equipment-watch" and item["id"] == "ew-1") for item in body)


def test_similar_equipment_zero_limit_means_default(client):
    body = {"sourceId": "equipment-watch", "equipmentId": "ew-1"}
    default = client.post("/get-similar-equipment", json=body)
    zero = client.post("/get-similar-equipment", json={**body, "limit": 0})

    assert zero.status_code == 200
    assert [item["id"] for item in zero.json()] == [item["id"] for item in default.json()]


def test_market_value_estimate(client):
    response = client.post("/get-market-value-estimate", json={"make": "CAT", "model": "320D L"})
    assert response.status_code == 200
    # catalog prices 65000, 78000, 85000, 92000
    assert response.json() == {"estimatedValue": 80000, "valueRange": [58500, 101200], "confidence": 0.8}

    assert client.post("/get-market-value-estimate", json={"make": "CAT"}).json() == {"error": "Make and model are required"}


def test_healthz(client):
    assert client.get("/healthz").json() == {"ok": True, "sources": ["equipment-watch", "mascus"]}
