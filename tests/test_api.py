from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from cpgnav.api import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def test_healthz(client: TestClient) -> None:
    assert client.get("/healthz").json() == {"status": "ok"}


def test_open_section(client: TestClient) -> None:
    response = client.post("/cpg/open", json={"query": "stroke", "session_id": "api-1"})
    assert response.status_code == 200
    body = response.json()
    assert body["found"] is True
    assert body["entry"]["id"] == "cpg-3.1"
    assert body["navigation"]["document_id"] == "CPG"

    state = client.get("/session/api-1").json()
    assert [item["entry_id"] for item in state["recent"]] == ["cpg-3.1"]


def test_search_and_categories(client: TestClient) -> None:
    body = client.post("/cpg/search", json={"query": "cpr"}).json()
    assert body["total"] == 4
    assert [item["id"] for item in body["results"]] == ["cpg-2.1", "cpg-2.3", "cpg-2.8", "cpg-2.9"]

    listing = client.get("/cpg/categories", params={"category": "Transfer"}).json()
    assert listing["category"] == "Transfer"
    assert len(listing["sections"]) == 6


def test_search_rejects_zero_limit(client: TestClient) -> None:
    response = client.post("/cpg/search", json={"query": "cpr", "limit": 0})
    assert response.status_code == 422


def test_get_entry_not_found(client: TestClient) -> None:
    assert client.get("/cpg/entries/cpg-2.1").json()["page"] == 34
    response = client.get("/cpg/entries/cpg-99.9")
    assert response.status_code == 404
    assert response.json()["detail"] == "entry not found: cpg-99.9"


def test_app_navigation(client: TestClient) -> None:
    response = client.post("/app/navigate", json={"section": "CPR", "reason": "Timer needed"})
    assert response.status_code == 200
    assert response.json()["section"]["route"] == "/cpr"
    assert client.post("/app/navigate", json={"section": "dosing"}).status_code == 422


def test_session_round_trip(client: TestClient) -> None:
    toggled = client.post("/session/bookmarks/toggle", json={"entry_id": "cpg-6.2", "session_id": "api-2"})
    assert toggled.json()["action"] == "added"
    client.post("/session/recent", json={"entry_id": "cpg-8.6", "session_id": "api-2"})
    client.post("/session/favorites/toggle", json={"entry_id": "cpg-8.6", "session_id": "api-2"})

    state = client.get("/session/api-2").json()
    assert [item["entry_id"] for item in state["bookmarks"]] == ["cpg-6.2"]
    assert [item["entry_id"] for item in state["recent"]] == ["cpg-8.6"]
    assert state["favorites"] == ["cpg-8.6"]

    again = client.post("/session/bookmarks/toggle", json={"entry_id": "cpg-6.2", "session_id": "api-2"})
    assert again.json()["action"] == "removed"


def test_bookmark_status_remove_and_clear(client: TestClient) -> None:
    client.post("/session/bookmarks/toggle", json={"entry_id": "cpg-3.1", "session_id": "api-3"})
    client.post("/session/favorites/toggle", json={"entry_id": "cpg-3.1", "session_id": "api-3"})

    assert client.get("/session/api-3/bookmarks/cpg-3.1").json()["bookmarked"] is True
    assert client.get("/session/api-3/favorites/cpg-3.1").json()["favorite"] is True

    removed = client.delete("/session/api-3/bookmarks/cpg-3.1")
    assert removed.status_code == 200
    assert removed.json() == {"document_id": "CPG", "entry_id": "cpg-3.1", "removed": True}
    assert client.get("/session/api-3/bookmarks/cpg-3.1").json()["bookmarked"] is False

    cleared = client.delete("/session/api-3")
    assert cleared.json() == {"bookmarks": [], "recent": [], "favorites": []}
    assert client.get("/session/api-3/favorites/cpg-3.1").json()["favorite"] is False
