"""
API tests for system endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from movie_catalog.api.dependencies import get_db
from movie_catalog.api.main import app
from movie_catalog.database import DatabaseManager, seed_sample_movies


@pytest.fixture
def client():
    manager = DatabaseManager(database_url="sqlite://")
    manager.create_tables()
    seed_sample_movies(manager)

    def override_get_db():
        with manager.session_scope() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
    manager.close()


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["docs"] == "/docs"


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "healthy"
    assert data["database"] == "connected"
    assert data["movies"] > 0


def test_seeded_movies_are_listed(client):
    r = client.get("/movies")
    assert r.status_code == 200
    titles = [m["title"] for m in r.json()]
    assert "The Matrix" in titles
    assert all(m["state"] == "true" for m in r.json())
