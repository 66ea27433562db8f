"""HTTP-level tests for the FastAPI shell."""

import pytest
from fastapi.testclient import TestClient

from catalog_search.main import app, service


@pytest.fixture
def client(catalog):
    service.load(catalog)
    yield TestClient(app)
    service.load([])


def test_search_returns_ranked_suggestions(client):
    response = client.get("/search", params={"q": "running"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["query"] == "running"
    assert [item["id"] for item in payload["results"]] == [1, 2]
    first = payload["results"][0]
    assert first["primary"] == "Red Running Shoe"
    assert first["secondary"] == "₹50 • Footwear"
    assert first["path"] == "/product/1"
    assert first["score"] == 0.0


def test_short_query_is_not_an_error(client):
    response = client.get("/search", params={"q": "r"})

    assert response.status_code == 200
    assert response.json()["results"] == []


def test_replace_catalog_reports_skipped_records(client):
    response = client.put(
        "/catalog",
        json={"products": [{"id": 5, "name": "Walnut Desk", "price": 120}, {"name": "Orphan"}], "version": "2"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "total": 2,
        "indexed": 1,
        "skipped_missing_id": 1,
        "duplicate_ids": [],
        "version": "2",
    }
    results = client.get("/search", params={"q": "walnut"}).json()["results"]
    assert [item["id"] for item in results] == [5]


def test_malformed_catalog_is_rejected(client):
    response = client.put("/catalog", json={"products": [{"id": 1, "price": "cheap"}]})

    assert response.status_code == 422


def test_select_product(client):
    response = client.get("/products/3/select")

    assert response.status_code == 200
    assert response.json() == {"id": 3, "path": "/product/3"}
    assert client.get("/products/404/select").status_code == 404


def test_health_reports_index_state(client):
    assert client.get("/health").json()["indexed"] == 3


def test_search_renders_non_text_fields(client):
    service.load(
        [
            {"id": 1, "name": 2024, "price": 10},
            {"id": 2, "name": "Desk", "category": 7},
            {"id": 3.5, "name": "Desk Lamp"},
        ]
    )

    numeric_name = client.get("/search", params={"q": "2024"})
    assert numeric_name.status_code == 200
    assert numeric_name.json()["results"][0]["primary"] == "2024"

    desks = client.get("/search", params={"q": "desk"})
    assert desks.status_code == 200
    results = desks.json()["results"]
    assert results[0]["category"] == "7"
    assert results[0]["secondary"] == "7"
    assert results[1]["id"] == "3.5"


def test_whole_number_price_renders_without_decimal(client):
    client.put("/catalog", json={"products": [{"id": 1, "name": "Red Running Shoe", "category": "Footwear", "price": 50}]})

    result = client.get("/search", params={"q": "running"}).json()["results"][0]

    assert result["secondary"] == "₹50 • Footwear"
    assert result["price"] == 50.0
