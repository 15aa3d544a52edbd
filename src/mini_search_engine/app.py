"""Main ASGI application entry point.

Architecture:
    Starlette App
      ├── GET  /                  → endpoint listing
      ├── POST /articles          → add article
      ├── GET  /articles/search   → keyword/tag search
      ├── GET  /articles/{id}     → fetch article
      ├── GET  /health            → engine status
      └── GET  /metrics           → Prometheus metrics

The engine is constructed once per application and stored on
``app.state.engine``; the lifespan loads the article snapshot before
traffic is served.

Usage:
    python -m mini_search_engine.app

    # Or override settings through the environment
    PORT=8080 ARTICLES_FILE=/data/articles.json python -m mini_search_engine.app
"""

from __future__ import annotations

from contextlib import asynccontextmanager
import logging
import time

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Match, Route

from mini_search_engine.api.errors import EXCEPTION_HANDLERS
from mini_search_engine.api.routes import build_routes
from mini_search_engine.config import Settings
from mini_search_engine.observability.logging import configure_logging
from mini_search_engine.observability.metrics import REQUEST_COUNT, REQUEST_LATENCY
from mini_search_engine.observability.tracing import TraceContextMiddleware, init_tracing
from mini_search_engine.runtime.health import build_health_endpoint, build_metrics_endpoint
from mini_search_engine.search_engine import MiniSearchEngine


logger = logging.getLogger(__name__)


def _route_label(request: Request) -> str:
    for route in request.app.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return getattr(route, "path", "unknown")
    return "unmatched"


async def record_request_metrics(request: Request, call_next) -> Response:
    """Count requests and observe latency per route template."""
    route = _route_label(request)
    start = time.perf_counter()
    status = "500"
    try:
        response = await call_next(request)
        status = str(response.status_code)
        return response
    finally:
        REQUEST_LATENCY.labels(route=route, method=request.method).observe(time.perf_counter() - start)
        REQUEST_COUNT.labels(route=route, method=request.method, status=status).inc()


def create_app(settings: Settings | None = None, engine: MiniSearchEngine | None = None) -> Starlette:
    """Create ASGI application.

    Args:
        settings: Runtime settings (loaded from the environment when omitted)
        engine: Pre-built engine; one backed by ``settings.articles_file`` is
            created when omitted

    Returns:
        Starlette application serving the article API
    """
    settings = settings or Settings()
    engine = engine or MiniSearchEngine(settings.articles_file)

    @asynccontextmanager
    async def lifespan(app: Starlette):
        """Load the article snapshot before serving traffic."""
        loaded = await engine.load_articles()
        logger.info("Loaded %d articles from %s", loaded, engine.snapshot_path)
        logger.info("Search Engine running on port %d", settings.port)
        try:
            yield
        finally:
            logger.info("Search Engine shutting down (%d articles)", engine.store.count())

    routes: list[Route] = [
        Route("/health", endpoint=build_health_endpoint(), methods=["GET"]),
        Route("/metrics", endpoint=build_metrics_endpoint(), methods=["GET"]),
        *build_routes(),
    ]

    app = Starlette(
        debug=False,
        routes=routes,
        middleware=[
            Middleware(TraceContextMiddleware),
            Middleware(BaseHTTPMiddleware, dispatch=record_request_metrics),
        ],
        exception_handlers=EXCEPTION_HANDLERS,
        lifespan=lifespan,
    )
    app.state.engine = engine
    app.state.settings = settings
    return app


def main() -> None:
    """Main entry point for the search server."""
    import uvicorn

    settings = Settings()
    configure_logging(settings.log_level, json_output=settings.log_json, access_log=settings.access_log)
    init_tracing(settings.service_name)

    logger.info("Starting Mini Search Engine")
    logger.info("Snapshot: %s", settings.articles_file)

    app = create_app(settings)

    logger.info("Starting server on %s:%d", settings.host, settings.port)
    logger.info("Health check: http://%s:%d/health", settings.host, settings.port)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,  # Don't let uvicorn override our logging config
    )


if __name__ == "__main__":
    main()
