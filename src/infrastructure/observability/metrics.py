"""
Prometheus metrics for the Library Catalog API.

Defines request-level and catalog-level metrics and a ``setup_metrics``
helper that instruments a FastAPI application and exposes ``/metrics``.
"""

from __future__ import annotations

import time

from fastapi import FastAPI, Request, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    REGISTRY,
    Counter,
    Histogram,
    generate_latest,
)
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response as StarletteResponse


# ======================================================================
# Metrics (module-level singletons)
# ======================================================================

api_requests_total = Counter(
    "library_api_requests_total",
    "Total number of API requests",
    labelnames=["method", "endpoint", "status"],
    registry=REGISTRY,
)

api_request_duration_seconds = Histogram(
    "library_api_request_duration_seconds",
    "Request latency in seconds",
    labelnames=["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
    registry=REGISTRY,
)

book_upserts_total = Counter(
    "library_book_upserts_total",
    "Book PUT/PATCH requests by outcome",
    labelnames=["method", "outcome"],
    registry=REGISTRY,
)


# ======================================================================
# Middleware
# ======================================================================

class PrometheusMiddleware(BaseHTTPMiddleware):
    """Records request count and latency per route template."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start = time.perf_counter()
        response: Response = await call_next(request)
        duration = time.perf_counter() - start

        endpoint = self._get_path_template(request)
        api_requests_total.labels(
            method=request.method,
            endpoint=endpoint,
            status=str(response.status_code),
        ).inc()
        api_request_duration_seconds.labels(
            method=request.method,
            endpoint=endpoint,
        ).observe(duration)

        return response

    @staticmethod
    def _get_path_template(request: Request) -> str:
        """
        Route template (``/api/v1/authors/{author_id}``) rather than the raw
        path, so label cardinality stays bounded.
        """
        route = request.scope.get("route")
        if route and hasattr(route, "path"):
            return route.path
        return "unmatched"


def record_book_upsert(method: str, outcome: str) -> None:
    book_upserts_total.labels(method=method, outcome=outcome).inc()


# ======================================================================
# Setup helper
# ======================================================================

def setup_metrics(app: FastAPI) -> None:
    """
    Add :class:`PrometheusMiddleware` and a ``/metrics`` endpoint serving
    the Prometheus exposition format.
    """
    app.add_middleware(PrometheusMiddleware)

    @app.get("/metrics", include_in_schema=False)
    async def metrics_endpoint() -> StarletteResponse:
        return StarletteResponse(
            content=generate_latest(REGISTRY),
            media_type=CONTENT_TYPE_LATEST,
        )
