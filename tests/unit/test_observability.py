"""Unit tests for observability module."""

import json
import logging
from pathlib import Path
import sys

from opentelemetry import trace as trace_api
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode
from prometheus_client import REGISTRY
import pytest

from mini_search_engine.observability import (
    SEARCH_LATENCY,
    JsonFormatter,
    configure_logging,
    create_span,
    get_metrics,
    get_metrics_content_type,
    get_trace_context,
    set_trace_context,
    track_latency,
    tracing as tracing_module,
)
from mini_search_engine.observability.context import update_span_id


def _record(msg="test message", name="test", level=logging.INFO, args=(), exc_info=None):
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=args,
        exc_info=exc_info,
    )


@pytest.mark.unit
class TestJsonFormatter:
    """Tests for structured JSON logging."""

    def test_format_includes_trace_context(self):
        set_trace_context("a" * 32, "b" * 16, route="/articles")

        data = json.loads(JsonFormatter().format(_record()))

        assert data["message"] == "test message"
        assert data["level"] == "INFO"
        assert data["trace_id"] == "a" * 32
        assert data["span_id"] == "b" * 16
        assert data["route"] == "/articles"
        assert "timestamp" in data

    def test_component_from_dotted_logger(self):
        data = json.loads(JsonFormatter().format(_record(name="mini_search_engine.search_engine")))
        assert data["component"] == "search_engine"

    def test_extra_fields_serialized_and_redacted(self):
        record = _record()
        record.article_id = 7
        record.snapshot = Path("/tmp/articles.json")
        record.token = "hunter2"

        data = json.loads(JsonFormatter().format(record))

        assert data["article_id"] == 7
        assert data["snapshot"] == "/tmp/articles.json"
        assert data["token"] == "[REDACTED]"

    def test_long_messages_truncated(self):
        data = json.loads(JsonFormatter().format(_record(msg="x" * 3000)))
        assert len(data["message"]) == JsonFormatter.MAX_MESSAGE_LEN + 3

    def test_exception_included(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = _record(level=logging.ERROR, exc_info=sys.exc_info())

        data = json.loads(JsonFormatter().format(record))

        assert "RuntimeError: boom" in data["exception"]


@pytest.mark.unit
class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        access_level = logging.getLogger("uvicorn.access").level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)
        logging.getLogger("uvicorn.access").setLevel(access_level)

    def test_json_handler_installed(self):
        configure_logging("debug", json_output=True)

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert logging.getLogger("uvicorn.access").level == logging.WARNING

    def test_plain_output_keeps_access_log(self):
        logging.getLogger("uvicorn.access").setLevel(logging.NOTSET)

        configure_logging("warning", json_output=False, access_log=True)

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)
        assert logging.getLogger("uvicorn.access").level == logging.NOTSET

    def test_unknown_level_falls_back_to_info(self):
        configure_logging("chatty")
        assert logging.getLogger().level == logging.INFO


@pytest.mark.unit
class TestTraceContext:
    def test_context_created_on_first_access(self):
        ctx = get_trace_context()
        assert len(ctx["trace_id"]) == 32
        assert len(ctx["span_id"]) == 16

    def test_update_span_keeps_trace(self):
        set_trace_context("c" * 32, "d" * 16, route="/health")
        update_span_id("e" * 16)

        ctx = get_trace_context()
        assert ctx == {"trace_id": "c" * 32, "span_id": "e" * 16, "route": "/health"}


@pytest.mark.unit
class TestCreateSpan:
    @pytest.fixture
    def exporter(self, monkeypatch):
        exporter = InMemorySpanExporter()
        provider = TracerProvider()
        provider.add_span_processor(SimpleSpanProcessor(exporter))
        monkeypatch.setitem(tracing_module._tracer_holder, "tracer", provider.get_tracer("test"))
        return exporter

    def test_records_attributes(self, exporter):
        with create_span("article.search", attributes={"search.sort": "date"}):
            pass

        (span,) = exporter.get_finished_spans()
        assert span.name == "article.search"
        assert span.attributes["search.sort"] == "date"
        assert span.kind == trace_api.SpanKind.INTERNAL

    def test_span_id_mirrored_into_log_context(self, exporter):
        with create_span("article.add") as span:
            expected = format(span.get_span_context().span_id, "016x")
            assert get_trace_context()["span_id"] == expected

    def test_records_errors(self, exporter):
        with pytest.raises(ValueError), create_span("article.add"):
            raise ValueError("bad")

        (span,) = exporter.get_finished_spans()
        assert span.status.status_code == StatusCode.ERROR
        assert span.events[0].name == "exception"


@pytest.mark.unit
class TestMetrics:
    def test_track_latency_observes_histogram(self):
        labels = {"sort": "observability-test"}
        before = REGISTRY.get_sample_value("search_latency_seconds_count", labels) or 0.0

        with track_latency(SEARCH_LATENCY, **labels):
            pass

        assert REGISTRY.get_sample_value("search_latency_seconds_count", labels) == before + 1

    def test_exposition(self):
        assert b"snapshot_write_errors_total" in get_metrics()
        assert get_metrics_content_type().startswith("text/plain")
