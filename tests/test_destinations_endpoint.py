"""Endpoint tests for GET /api/destinations, in-process via TestClient."""
import json


def test_default_catalog_has_three_destinations(client):
    response = client.get("/api/destinations")
    assert response.status_code == 200
    assert len(response.json()) == 3


def test_records_are_objects(client):
    for record in client.get("/api/destinations").json():
        assert isinstance(record, dict)


def test_custom_catalog_returned_unchanged_in_order(make_client, catalog_file, sample_destinations):
    client = make_client(catalog_file)
    response = client.get("/api/destinations")
    assert response.status_code == 200
    assert response.json() == sample_destinations


def test_empty_catalog_returns_empty_list(make_client, tmp_path):
    path = tmp_path / "empty.json"
    path.write_text("[]", encoding="utf-8")
    response = make_client(path).get("/api/destinations")
    assert response.status_code == 200
    assert response.json() == []


def test_missing_catalog_returns_503(make_client, tmp_path):
    client = make_client(tmp_path / "does-not-exist.json")
    response = client.get("/api/destinations")
    assert response.status_code == 503
    assert "not loaded" in response.json()["detail"]


def test_malformed_catalog_returns_503(make_client, tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"destinations": []}), encoding="utf-8")
    client = make_client(path)
    assert client.get("/api/destinations").status_code == 503
    health = client.get("/health").json()
    assert health["status"] == "healthy"
    assert health["catalog_loaded"] is False
    assert health["destination_count"] == 0


def test_response_mutation_does_not_leak_into_cache(make_client, catalog_file, sample_destinations):
    from destinations_api import catalog

    client = make_client(catalog_file)
    first = catalog.get_destinations()
    first[0]["name"] = "changed"
    first[0]["tags"].append("changed")
    assert client.get("/api/destinations").json() == sample_destinations


def test_cors_preflight(client):
    response = client.options(
        "/api/destinations",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


def test_post_not_allowed(client):
    assert client.post("/api/destinations", json={}).status_code == 405
