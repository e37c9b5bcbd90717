"""Prometheus metrics for search calls."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


SEARCH_COUNT = Counter(
    "seekr_searches_total",
    "Total search calls",
    ["data_type", "outcome"],
)

SEARCH_LATENCY = Histogram(
    "seekr_search_latency_seconds",
    "Search latency in seconds",
    ["data_type"],
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5),
)

SEARCH_MATCHES = Histogram(
    "seekr_search_matches",
    "Number of elements returned per search",
    ["data_type"],
    buckets=(0, 1, 5, 10, 50, 100, 500, 1000),
)


@contextmanager
def track_latency(histogram: Histogram, **labels: str) -> Generator[None, None, None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        histogram.labels(**labels).observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest()


def get_metrics_content_type() -> str:
    return CONTENT_TYPE_LATEST
