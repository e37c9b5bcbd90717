"""Observability module: structured logging, Prometheus metrics and OpenTelemetry tracing."""

from seekr.observability.context import get_trace_context, trace_context, update_span_id
from seekr.observability.logging import JsonFormatter, configure_logging, configure_logging_from_settings
from seekr.observability.metrics import (
    SEARCH_COUNT,
    SEARCH_LATENCY,
    SEARCH_MATCHES,
    get_metrics,
    get_metrics_content_type,
    track_latency,
)
from seekr.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "SEARCH_COUNT",
    "SEARCH_LATENCY",
    "SEARCH_MATCHES",
    "JsonFormatter",
    "configure_logging",
    "configure_logging_from_settings",
    "create_span",
    "get_metrics",
    "get_metrics_content_type",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "trace_context",
    "track_latency",
    "update_span_id",
]
