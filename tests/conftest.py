"""Shared pytest fixtures for API testing"""
import copy
import json

import pytest
from fastapi.testclient import TestClient

_SAMPLE_DESTINATIONS = [
    {"id": "a", "name": "Reykjavik", "tags": ["north", "hot springs"]},
    {"id": "b", "name": "Valparaiso"},
]


@pytest.fixture(autouse=True)
def _redirect_request_log(tmp_path, monkeypatch):
    """Keep the request log out of the working tree."""
    import destinations_api.api.middleware as mw_module

    log_path = tmp_path / "api_requests.jsonl"
    monkeypatch.setattr(mw_module, "_REQUESTS_LOG", str(log_path))
    return log_path


@pytest.fixture
def client():
    """FastAPI test client with the lifespan run (default packaged catalog)"""
    from destinations_api.api.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_destinations():
    """Records of the custom test catalog (fresh copy per test)."""
    return copy.deepcopy(_SAMPLE_DESTINATIONS)


@pytest.fixture
def catalog_file(tmp_path, sample_destinations):
    """A small custom catalog on disk."""
    path = tmp_path / "destinations.json"
    path.write_text(json.dumps(sample_destinations), encoding="utf-8")
    return path


@pytest.fixture
def make_client(monkeypatch):
    """Build a client whose lifespan loads DESTINATIONS_FILE=path."""
    from destinations_api.api.main import app

    clients = []

    def _make(path):
        monkeypatch.setenv("DESTINATIONS_FILE", str(path))
        c = TestClient(app)
        c.__enter__()
        clients.append(c)
        return c

    yield _make
    for c in clients:
        c.__exit__(None, None, None)
