"""HTTP endpoints for adding, fetching and searching articles."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError as PydanticValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from mini_search_engine.api.errors import InvalidRequestBodyError
from mini_search_engine.api.schemas import CreateArticleRequest, SearchParams
from mini_search_engine.domain.exceptions import NotFoundError
from mini_search_engine.search_engine import MiniSearchEngine


logger = logging.getLogger(__name__)

ENDPOINTS = [
    {"method": "POST", "path": "/articles", "description": "Add a new article"},
    {"method": "GET", "path": "/articles/search", "description": "Search articles by keyword"},
    {"method": "GET", "path": "/articles/:id", "description": "Get a specific article by ID"},
]


def _engine(request: Request) -> MiniSearchEngine:
    return request.app.state.engine


async def _read_json_body(request: Request) -> object:
    body = await request.body()
    if not body.strip():
        return {}
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidRequestBodyError(f"Malformed JSON: {exc}") from exc


async def index(request: Request) -> JSONResponse:
    return JSONResponse({"message": "Welcome to Mini Search Engine API", "endpoints": ENDPOINTS})


async def create_article(request: Request) -> JSONResponse:
    payload = await _read_json_body(request)
    try:
        body = CreateArticleRequest.model_validate(payload)
    except PydanticValidationError as exc:
        raise InvalidRequestBodyError(str(exc)) from exc

    article = await _engine(request).add_article(body.title, body.content, body.tags)
    return JSONResponse(article.to_dict(), status_code=201)


async def search_articles(request: Request) -> JSONResponse:
    params = SearchParams.model_validate(dict(request.query_params))
    results = _engine(request).search_articles(params.q, params.sort)
    return JSONResponse([result.to_dict() for result in results])


async def get_article(request: Request) -> JSONResponse:
    raw_id = request.path_params["article_id"]
    try:
        article_id = int(raw_id)
    except ValueError as exc:
        raise NotFoundError(raw_id) from exc

    article = _engine(request).get_article(article_id)
    return JSONResponse(article.to_dict())


def build_routes() -> list[Route]:
    """Article routes; ``/articles/search`` precedes the ``{article_id}`` pattern."""
    return [
        Route("/", endpoint=index, methods=["GET"]),
        Route("/articles", endpoint=create_article, methods=["POST"]),
        Route("/articles/search", endpoint=search_articles, methods=["GET"]),
        Route("/articles/{article_id}", endpoint=get_article, methods=["GET"]),
    ]
