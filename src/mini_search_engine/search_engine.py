"""Mini Search Engine - deep module facade.

Owns the article store, inverted index, search service and snapshot store
for the lifetime of the process. The HTTP layer receives one explicitly
constructed instance at startup.

Interface Methods:
- add_article(title, content, tags) -> Article
- get_article(article_id) -> Article
- search_articles(query, sort_by) -> list[ScoredArticle]
- load_articles() -> int
"""

from __future__ import annotations

from collections.abc import Iterable
import logging
from pathlib import Path

from mini_search_engine.adapters.snapshot_store import JsonSnapshotStore
from mini_search_engine.domain.exceptions import PersistenceError
from mini_search_engine.domain.model import SORT_BY_DATE, SORT_BY_RELEVANCE, Article, ScoredArticle
from mini_search_engine.observability.metrics import ARTICLE_COUNT, SEARCH_LATENCY, SNAPSHOT_WRITE_ERRORS, track_latency
from mini_search_engine.observability.tracing import create_span
from mini_search_engine.service_layer.article_store import ArticleStore
from mini_search_engine.service_layer.search_service import SearchService


logger = logging.getLogger(__name__)


def _sort_label(sort_by: str) -> str:
    """Bound metric label cardinality; any unrecognised sort counts as "other"."""
    return sort_by if sort_by in (SORT_BY_RELEVANCE, SORT_BY_DATE) else "other"


class MiniSearchEngine:
    """Article store with keyword and tag search, persisted as a JSON snapshot."""

    def __init__(self, snapshot_path: Path, *, store: ArticleStore | None = None):
        self.snapshot_store = JsonSnapshotStore(snapshot_path)
        self.store = store or ArticleStore()
        self.search_service = SearchService(self.store)

    @property
    def snapshot_path(self) -> Path:
        return self.snapshot_store.path

    async def add_article(self, title: str | None, content: str | None, tags: Iterable[str] | None = None) -> Article:
        """Store and index a new article, then write the snapshot.

        A failed snapshot write is logged and does not undo the add.

        Raises:
            ValidationError: title or content is missing or empty
        """
        tag_list = list(tags or [])
        with create_span("article.add", attributes={"article.tag_count": len(tag_list)}):
            article = self.store.add(title, content, tag_list)
        ARTICLE_COUNT.set(self.store.count())
        await self.persist_articles()
        return article

    def get_article(self, article_id: int) -> Article:
        """Raises NotFoundError for unknown ids."""
        return self.store.get(article_id)

    def search_articles(self, query: str | None, sort_by: str = SORT_BY_RELEVANCE) -> list[ScoredArticle]:
        with (
            create_span("article.search", attributes={"search.sort": sort_by}) as span,
            track_latency(SEARCH_LATENCY, sort=_sort_label(sort_by)),
        ):
            results = self.search_service.search(query, sort_by)
            span.set_attribute("search.result_count", len(results))
        return results

    async def persist_articles(self) -> bool:
        """Write the full snapshot; returns False (after logging) on failure."""
        try:
            await self.snapshot_store.save(self.store.list_articles())
        except PersistenceError as exc:
            SNAPSHOT_WRITE_ERRORS.inc()
            logger.error("Error persisting articles: %s", exc)
            return False
        return True

    async def load_articles(self) -> int:
        """Populate the store from the snapshot, if one can be read.

        Returns the number of articles loaded; an absent or unreadable
        snapshot leaves the store empty.
        """
        try:
            articles = await self.snapshot_store.load()
        except PersistenceError as exc:
            logger.warning("Could not load articles, starting empty: %s", exc)
            articles = None

        if articles is None:
            logger.info("No existing articles file found at %s", self.snapshot_path)
            articles = []

        self.store.load_from_snapshot(articles)
        ARTICLE_COUNT.set(len(articles))
        return len(articles)

    def health(self) -> dict:
        return {
            "status": "healthy",
            "articles": self.store.count(),
            "next_id": self.store.next_id,
            "index": self.store.index.stats(),
            "snapshot_path": str(self.snapshot_path),
        }
