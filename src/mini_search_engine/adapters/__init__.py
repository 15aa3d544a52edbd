"""Infrastructure adapters: article repository and snapshot persistence."""

from mini_search_engine.adapters.article_repository import AbstractArticleRepository, InMemoryArticleRepository
from mini_search_engine.adapters.snapshot_store import JsonSnapshotStore


__all__ = [
    "AbstractArticleRepository",
    "InMemoryArticleRepository",
    "JsonSnapshotStore",
]
