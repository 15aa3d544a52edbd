"""Health and metrics endpoint factories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.responses import JSONResponse, Response

from mini_search_engine.observability.metrics import get_metrics, get_metrics_content_type


if TYPE_CHECKING:
    from starlette.requests import Request


def build_health_endpoint():
    """Return a coroutine function reporting engine size and snapshot location."""

    async def health_check(request: Request) -> JSONResponse:
        engine = getattr(request.app.state, "engine", None)
        if engine is None:
            return JSONResponse({"status": "starting"}, status_code=503)
        return JSONResponse(engine.health())

    return health_check


def build_metrics_endpoint():
    """Return a coroutine function serving Prometheus exposition text."""

    async def metrics(request: Request) -> Response:
        return Response(get_metrics(), media_type=get_metrics_content_type())

    return metrics
