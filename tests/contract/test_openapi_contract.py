"""Contract tests for the OpenAPI document and operational endpoints."""

from __future__ import annotations

import pytest


@pytest.mark.contract
class TestOpenAPIContract:

    def test_health_endpoint(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["backend"] == "memory"
        assert "version" in data
        assert "timestamp" in data

    def test_openapi_schema_available(self, client):
        resp = client.get("/openapi.json")
        assert resp.status_code == 200
        schema = resp.json()
        assert schema["info"]["title"] == "Library Catalog API"

    def test_catalog_endpoints_documented(self, client):
        paths = client.get("/openapi.json").json()["paths"]
        assert set(paths["/api/v1/authors"]) == {"get", "post"}
        assert set(paths["/api/v1/authors/{author_id}"]) == {"get", "post", "delete"}
        assert set(paths["/api/v1/authors/{author_id}/books/{book_id}"]) == {
            "get",
            "put",
            "patch",
            "delete",
        }

    def test_list_authors_documents_query_parameters(self, client):
        operation = client.get("/openapi.json").json()["paths"]["/api/v1/authors"]["get"]
        names = {p["name"] for p in operation["parameters"]}
        assert names == {"search_query", "genre", "page_number", "page_size"}
        assert "X-Pagination" in operation["responses"]["200"]["headers"]

    def test_metrics_endpoint(self, client):
        client.get("/health")
        resp = client.get("/metrics")
        assert resp.status_code == 200
        assert "library_api_requests_total" in resp.text

    def test_request_id_header(self, client):
        resp = client.get("/health")
        assert resp.headers["X-Request-ID"]

    def test_request_id_echoed(self, client):
        resp = client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert resp.headers["X-Request-ID"] == "abc-123"
