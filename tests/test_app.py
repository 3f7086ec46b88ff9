"""
Tests for the read-only docs API.
"""
import pytest
from fastapi.testclient import TestClient

from Backend import app as backend
from runtime import RegistryLoader


@pytest.fixture
def client(sample_docs, builder, artifact_path, monkeypatch):
    builder.build_and_write()
    monkeypatch.setattr(backend, "loader", RegistryLoader(artifact_path))
    monkeypatch.setattr(backend, "fetch_learn_item", lambda filename: f"# {filename}\n")
    return TestClient(backend.app)


@pytest.fixture
def fallback_client(tmp_path, monkeypatch):
    monkeypatch.setattr(backend, "loader", RegistryLoader(tmp_path / "missing.json"))
    return TestClient(backend.app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_docs(client):
    data = client.get("/api/docs").json()

    assert data["fallback"] is False
    assert [item["filename"] for item in data["items"]][:2] == ["arrays", "http_requests"]
    assert data["items"][0] == {
        "title": "Arrays",
        "href": "/docs/learn/arrays",
        "description": "Arrays let you store ordered collections of values for later use.",
        "filename": "arrays",
    }


def test_categories(client):
    data = client.get("/api/docs/categories").json()

    assert data["categories"] == list(data["categorized"])
    assert data["categories"][0] == "Language Basics"
    assert [item["filename"] for item in data["categorized"]["Database"]] == ["sqlite"]


def test_doc_page(client):
    data = client.get("/api/docs/arrays").json()
    assert data["item"]["title"] == "Arrays"
    assert data["markdown"] == "# arrays\n"


def test_unknown_doc(client):
    response = client.get("/api/docs/nope")
    assert response.status_code == 404


def test_fallback_registry_served(fallback_client):
    data = fallback_client.get("/api/docs").json()
    assert data["fallback"] is True
    assert [item["title"] for item in data["items"]] == ["Numbers", "Strings"]
