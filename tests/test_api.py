"""
Tests for the FastAPI application factory and REST endpoints
"""

import pytest
from fastapi.testclient import TestClient

from bookshelf import __version__
from bookshelf.api.app import create_app
from bookshelf.store import get_store


def test_health_reports_counts():
    client = TestClient(create_app())

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "version": __version__,
        "authors": 3,
        "books": 8,
    }


def test_lifespan_reseeds_store():
    get_store().add_author(name="Left over")

    with TestClient(create_app()) as client:
        response = client.get("/health")

    assert response.json()["authors"] == 3


def test_response_carries_request_id():
    client = TestClient(create_app())

    response = client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


def test_request_id_generated_when_absent():
    client = TestClient(create_app())

    response = client.get("/health")

    assert response.headers["X-Request-ID"]


@pytest.mark.integration
def test_mutation_then_query_through_app():
    client = TestClient(create_app())

    created = client.post(
        "/graphql",
        json={"query": 'mutation { addAuthor(name: "Robin Hobb") { id name } }'},
    )
    listed = client.post("/graphql", json={"query": "{ authors { id } }"})

    assert created.json()["data"]["addAuthor"] == {"id": 4, "name": "Robin Hobb"}
    assert [a["id"] for a in listed.json()["data"]["authors"]] == [1, 2, 3, 4]


def test_mutation_over_get_is_not_allowed():
    client = TestClient(create_app())

    response = client.get(
        "/graphql", params={"query": 'mutation { addAuthor(name: "Nope") { id } }'}
    )

    assert response.status_code in (400, 405)
    assert get_store().counts()["authors"] == 3
