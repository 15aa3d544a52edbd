"""Observability module for tracing, metrics, and structured logging."""

from mini_search_engine.observability.context import get_trace_context, set_trace_context, trace_context
from mini_search_engine.observability.logging import JsonFormatter, configure_logging
from mini_search_engine.observability.metrics import (
    ARTICLE_COUNT,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    SEARCH_LATENCY,
    SNAPSHOT_WRITE_ERRORS,
    get_metrics,
    get_metrics_content_type,
    track_latency,
)
from mini_search_engine.observability.tracing import (
    TraceContextMiddleware,
    create_span,
    get_tracer,
    init_tracing,
)


__all__ = [
    "ARTICLE_COUNT",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "SEARCH_LATENCY",
    "SNAPSHOT_WRITE_ERRORS",
    "JsonFormatter",
    "TraceContextMiddleware",
    "configure_logging",
    "create_span",
    "get_metrics",
    "get_metrics_content_type",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "set_trace_context",
    "trace_context",
    "track_latency",
]
