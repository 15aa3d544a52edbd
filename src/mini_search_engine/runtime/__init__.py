"""Runtime helpers for the Starlette application."""

from mini_search_engine.runtime.health import build_health_endpoint, build_metrics_endpoint


__all__ = ["build_health_endpoint", "build_metrics_endpoint"]
