"""Unit tests for observability module."""

import json
import logging
import sys

from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode
from prometheus_client import REGISTRY
import pytest

from seekr import Seekr, SearchError
from seekr.config import Settings
from seekr.observability import (
    SEARCH_LATENCY,
    JsonFormatter,
    configure_logging,
    configure_logging_from_settings,
    create_span,
    get_metrics,
    get_metrics_content_type,
    get_trace_context,
    tracing as tracing_module,
    track_latency,
)
from seekr.observability.context import trace_context, update_span_id


def _record(msg: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="seekr.engine",
        level=level,
        pathname="engine.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def span_exporter(monkeypatch):
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    monkeypatch.setitem(tracing_module._tracer_holder, "tracer", provider.get_tracer("test"))
    return exporter


@pytest.mark.unit
class TestJsonFormatter:
    """Tests for structured JSON logging."""

    def test_format_includes_trace_context(self):
        data = json.loads(JsonFormatter().format(_record("test message")))

        assert data["message"] == "test message"
        assert data["level"] == "INFO"
        assert data["logger"] == "seekr.engine"
        assert data["component"] == "engine"
        assert "timestamp" in data
        assert "trace_id" in data
        assert "span_id" in data

    def test_format_includes_extra_fields(self):
        record = _record("search done")
        record.mode = "exact"
        record.deep = True

        data = json.loads(JsonFormatter().format(record))

        assert data["mode"] == "exact"
        assert data["deep"] is True

    def test_format_truncates_and_redacts(self):
        record = _record("x" * 5000)
        record.api_key = "secret"
        record.payload = "y" * 800

        data = json.loads(JsonFormatter().format(record))

        assert data["message"].endswith("...")
        assert len(data["message"]) == JsonFormatter.MAX_MESSAGE_LEN + 3
        assert data["api_key"] == "[REDACTED]"
        assert data["payload"].endswith("...")

    def test_format_includes_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord("seekr", logging.ERROR, "x.py", 1, "failed", (), sys.exc_info())

        data = json.loads(JsonFormatter().format(record))

        assert "ValueError: boom" in data["exception"]

    def test_json_default_handles_set_and_bytes(self):
        formatter = JsonFormatter()
        assert formatter._json_default({3, 1, 2}) == [1, 2, 3]
        assert formatter._json_default(b"ok") == "ok"

    def test_json_default_handles_unorderable_set(self):
        value = JsonFormatter()._json_default({1, "a"})
        assert isinstance(value, list)
        assert len(value) == 2

    def test_json_default_falls_back_to_repr(self):
        assert JsonFormatter()._json_default(object).startswith("<class")


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for root logger configuration."""

    def test_json_handler_installed(self, restore_root_logger):
        configure_logging("debug", json_output=True)

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)

    def test_plain_handler_and_overrides(self, restore_root_logger):
        configure_logging("warning", json_output=False, logger_levels={"seekr.engine": "debug"})

        assert restore_root_logger.level == logging.WARNING
        assert not isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)
        assert logging.getLogger("seekr.engine").level == logging.DEBUG
        logging.getLogger("seekr.engine").setLevel(logging.NOTSET)

    def test_from_settings(self, restore_root_logger):
        configure_logging_from_settings(Settings(log_level="error", log_json=True))

        assert restore_root_logger.level == logging.ERROR


@pytest.mark.unit
class TestTraceContext:
    """Tests for trace context propagation."""

    def test_get_trace_context_generates_ids(self):
        ctx = get_trace_context()
        assert len(ctx["trace_id"]) == 32
        assert len(ctx["span_id"]) == 16

    def test_update_span_id_preserves_trace_id(self):
        trace_id = get_trace_context()["trace_id"]
        update_span_id("cc" * 8)

        ctx = get_trace_context()
        assert ctx["trace_id"] == trace_id
        assert ctx["span_id"] == "cc" * 8

    def test_update_span_id_without_trace_id_starts_new_trace(self):
        token = trace_context.set(None)
        try:
            update_span_id("dd" * 8)
            ctx = get_trace_context()
        finally:
            trace_context.reset(token)

        assert len(ctx["trace_id"]) == 32

    def test_search_span_updates_log_context(self, span_exporter):
        settings = Settings(tracing_enabled=True, metrics_enabled=False)

        Seekr(["a"], settings=settings).search("a", None, {"mode": "exact"})

        (span,) = span_exporter.get_finished_spans()
        assert get_trace_context()["span_id"] == format(span.context.span_id, "016x")


@pytest.mark.unit
class TestMetrics:
    """Tests for Prometheus search metrics."""

    def test_track_latency_observes(self):
        before = REGISTRY.get_sample_value("seekr_search_latency_seconds_count", {"data_type": "test"}) or 0.0

        with track_latency(SEARCH_LATENCY, data_type="test"):
            pass

        after = REGISTRY.get_sample_value("seekr_search_latency_seconds_count", {"data_type": "test"})
        assert after == before + 1

    def test_search_counts_outcomes(self):
        settings = Settings(metrics_enabled=True)
        labels_ok = {"data_type": "array", "outcome": "ok"}
        labels_null = {"data_type": "null", "outcome": "null_data"}
        ok_before = REGISTRY.get_sample_value("seekr_searches_total", labels_ok) or 0.0
        null_before = REGISTRY.get_sample_value("seekr_searches_total", labels_null) or 0.0

        Seekr(["a"], settings=settings).search("a", None, {"mode": "exact"})
        with pytest.raises(SearchError):
            Seekr(None, settings=settings).search("a", None, {"mode": "exact"})

        assert REGISTRY.get_sample_value("seekr_searches_total", labels_ok) == ok_before + 1
        assert REGISTRY.get_sample_value("seekr_searches_total", labels_null) == null_before + 1

    def test_disabled_metrics_are_not_recorded(self):
        labels = {"data_type": "array", "outcome": "ok"}
        before = REGISTRY.get_sample_value("seekr_searches_total", labels) or 0.0

        Seekr(["a"], settings=Settings(metrics_enabled=False)).search("a", None, {"mode": "exact"})

        assert (REGISTRY.get_sample_value("seekr_searches_total", labels) or 0.0) == before

    def test_get_metrics_exposition(self):
        assert b"seekr_searches_total" in get_metrics()
        assert get_metrics_content_type().startswith("text/plain")


@pytest.mark.unit
class TestTracing:
    """Tests for OpenTelemetry tracing."""

    def test_create_span_sets_attributes(self, span_exporter):
        with create_span("test.operation", attributes={"test.key": "value"}):
            pass

        (span,) = span_exporter.get_finished_spans()
        assert span.name == "test.operation"
        assert span.attributes["test.key"] == "value"

    def test_create_span_records_errors(self, span_exporter):
        with pytest.raises(RuntimeError), create_span("test.failure"):
            raise RuntimeError("boom")

        (span,) = span_exporter.get_finished_spans()
        assert span.status.status_code is StatusCode.ERROR
        assert span.events[0].name == "exception"

    def test_search_span(self, span_exporter):
        settings = Settings(tracing_enabled=True, metrics_enabled=False)

        Seekr(["a"], settings=settings).search("a", None, {"mode": "exact"})

        (span,) = span_exporter.get_finished_spans()
        assert span.name == "seekr.search"
        assert span.attributes["seekr.data_type"] == "array"
        assert span.attributes["seekr.mode"] == "exact"

    def test_no_span_when_tracing_disabled(self, span_exporter):
        Seekr(["a"], settings=Settings(tracing_enabled=False)).search("a", None, {"mode": "exact"})

        assert span_exporter.get_finished_spans() == ()

    def test_get_tracer_falls_back_to_global_provider(self, monkeypatch):
        monkeypatch.setitem(tracing_module._tracer_holder, "tracer", None)

        assert tracing_module.get_tracer() is not None
