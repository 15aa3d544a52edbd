"""Service layer - article storage and search orchestration."""

from mini_search_engine.service_layer.article_store import ArticleStore
from mini_search_engine.service_layer.search_service import SearchService


__all__ = ["ArticleStore", "SearchService"]
