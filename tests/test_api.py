#!/usr/bin/env python3
"""
HTTP API Tests

Endpoints:
----------
- GET  /                                     status
- POST /api/search                           ranked results
- GET  /api/workers/{worker_id}/completeness profile completion

Error mapping: InvalidCriteria → 422, DataSourceUnavailable → 503 + Retry-After.

Run:
----
    pytest tests/test_api.py -v
"""

import pytest
from fastapi.testclient import TestClient

from discovery_server.app import create_app
from discovery_server.config import ServerConfig
from discovery_server.services import InMemoryWorkerStore
from discovery_server.state import AppState, set_state

from conftest import make_doc


class UnreachableStore(InMemoryWorkerStore):
    async def fetch_workers(self, equals):
        raise TimeoutError("deadline exceeded")


def _client(store):
    return TestClient(create_app(AppState(ServerConfig(), store=store)))


@pytest.fixture(autouse=True)
def reset_state():
    yield
    set_state(None)


@pytest.fixture
def client(store):
    return _client(store)


class TestSearchEndpoint:

    def test_ranked_results(self, client):
        response = client.post("/api/search", json={"job": "Waiter"})
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert [r["worker"]["id"] for r in body["results"]] == ["a", "b"]
        top = body["results"][0]
        assert top["score"] == {"experience": 0, "profile_picture": 10, "completeness": 10, "total": 20}
        assert top["match_details"]["is_profile_complete"] is True
        assert top["match_details"]["experience_breakdown"][0]["company"] == "Potato Head"

    def test_zero_results_is_success(self, client):
        response = client.post("/api/search", json={"job": "Gardener"})
        assert response.status_code == 200
        assert response.json() == {"results": [], "total": 0}

    def test_invalid_criteria(self, client):
        response = client.post("/api/search", json={"job": "Astronaut"})
        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "invalid_criteria"
        assert body["retryable"] is False
        assert body["errors"]

    def test_camel_case_keys_narrow_the_search(self):
        client = _client(InMemoryWorkerStore([
            make_doc(id="kuta", location=["Kuta"], contract_type="part_time"),
            make_doc(id="ubud", location=["Ubud"], contract_type="full_time"),
        ]))
        by_area = client.post("/api/search", json={"workArea": "Ubud"}).json()
        assert [r["worker"]["id"] for r in by_area["results"]] == ["ubud"]
        by_contract = client.post("/api/search", json={"contractType": "part_time"}).json()
        assert [r["worker"]["id"] for r in by_contract["results"]] == ["kuta"]
        snake = client.post("/api/search", json={"work_area": "Ubud"}).json()
        assert snake == by_area

    def test_unknown_key_is_invalid_criteria(self, client):
        response = client.post("/api/search", json={"jobb": "Waiter"})
        assert response.status_code == 422
        assert response.json()["error"] == "invalid_criteria"

    def test_missing_body_searches_everyone(self, client):
        response = client.post("/api/search")
        assert response.status_code == 200
        assert response.json()["total"] == 3

    def test_data_source_unavailable(self):
        client = _client(UnreachableStore([make_doc()]))
        response = client.post("/api/search", json={})
        assert response.status_code == 503
        assert response.headers["Retry-After"] == "5"
        assert response.json()["error"] == "data_source_unavailable"
        assert response.json()["retryable"] is True


class TestCompletenessEndpoint:

    def test_complete_profile(self, client):
        response = client.get("/api/workers/a/completeness")
        assert response.status_code == 200
        body = response.json()
        assert body["percentage"] == 100
        assert body["is_complete"] is True
        assert all(body["checklist"].values())

    def test_partial_profile(self, client):
        body = client.get("/api/workers/b/completeness").json()
        # b has no picture, no education and an empty about-me
        assert body["percentage"] == 57
        assert body["checklist"]["education"] is False

    def test_missing_worker(self, client):
        assert client.get("/api/workers/nobody/completeness").status_code == 404

    def test_malformed_worker(self):
        client = _client(InMemoryWorkerStore([make_doc(id="bad", job="Astronaut")]))
        assert client.get("/api/workers/bad/completeness").status_code == 422


def test_root(client):
    body = client.get("/").json()
    assert body["status"] == "ok"
    assert body["store"] == "InMemoryWorkerStore"
