"""Prometheus metrics definitions for Larder."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "larder_http_requests_total",
    "Total number of HTTP requests processed by the Larder API",
    ["method", "path", "status"],
)

REQUEST_LATENCY = Histogram(
    "larder_http_request_duration_seconds",
    "Latency of HTTP requests processed by the Larder API",
    ["method", "path"],
)

CONSOLIDATED_ITEMS = Histogram(
    "larder_consolidated_items",
    "Number of shopping list items produced per consolidation",
    buckets=(0, 5, 10, 20, 40, 80, 160),
)

SYNERGY_RECOMMENDATIONS = Counter(
    "larder_synergy_recommendations_total",
    "Number of synergy recipes recommended",
)

__all__ = [
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "CONSOLIDATED_ITEMS",
    "SYNERGY_RECOMMENDATIONS",
]
