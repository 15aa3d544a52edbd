"""HTTP surface: routes, request schemas and exception handlers."""

from mini_search_engine.api.errors import EXCEPTION_HANDLERS, InvalidRequestBodyError
from mini_search_engine.api.routes import ENDPOINTS, build_routes
from mini_search_engine.api.schemas import CreateArticleRequest, SearchParams


__all__ = [
    "ENDPOINTS",
    "EXCEPTION_HANDLERS",
    "CreateArticleRequest",
    "InvalidRequestBodyError",
    "SearchParams",
    "build_routes",
]
