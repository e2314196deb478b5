"""Contract tests running the application over the SQLAlchemy backend.

The lifespan runs here, so migrations and seeding happen on startup.
"""

from __future__ import annotations

import json
import uuid

import pytest

AUTHORS = "/api/v1/authors"


@pytest.fixture
def settings():
    from infrastructure.settings import AppSettings

    return AppSettings(
        repository_backend="sqlalchemy",
        database_url="sqlite://",
        run_migrations=True,
        seed_data=True,
        json_logs=False,
    )


@pytest.fixture
def live_client(app):
    from starlette.testclient import TestClient

    with TestClient(app) as client:
        yield client


@pytest.mark.contract
class TestSqlAlchemyBackend:

    def test_seeded_catalog_listed(self, live_client):
        resp = live_client.get(AUTHORS, params={"page_size": 4})
        assert resp.status_code == 200
        assert [a["name"] for a in resp.json()] == [
            "Douglas Adams",
            "George RR Martin",
            "James Ellroy",
            "Neil Gaiman",
        ]
        meta = json.loads(resp.headers["X-Pagination"])
        assert meta["total_count"] == 6
        assert meta["total_pages"] == 2

    def test_genre_filter(self, live_client):
        resp = live_client.get(AUTHORS, params={"genre": " FANTASY "})
        assert sorted(a["name"] for a in resp.json()) == ["George RR Martin", "Neil Gaiman"]

    def test_put_upsert_round_trip(self, live_client):
        author = live_client.get(AUTHORS, params={"search_query": "ellroy"}).json()[0]
        url = f"{AUTHORS}/{author['id']}/books/{uuid.uuid4()}"
        body = {"title": "L.A. Confidential", "description": "Three cops, one case."}

        assert live_client.put(url, json=body).status_code == 201
        assert live_client.put(url, json={**body, "description": "Bloody Christmas."}).status_code == 204
        assert live_client.get(url).json()["description"] == "Bloody Christmas."

    def test_delete_author_cascades(self, live_client):
        author = live_client.get(AUTHORS, params={"search_query": "king"}).json()[0]
        books_url = f"{AUTHORS}/{author['id']}/books"
        book_id = live_client.get(books_url).json()[0]["id"]

        assert live_client.delete(f"{AUTHORS}/{author['id']}").status_code == 204
        assert live_client.get(f"{books_url}/{book_id}").status_code == 404
