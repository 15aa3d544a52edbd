"""Article store - canonical article list, id counter and index maintenance."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
import logging
import threading

from mini_search_engine.adapters.article_repository import AbstractArticleRepository, InMemoryArticleRepository
from mini_search_engine.domain.exceptions import NotFoundError, ValidationError
from mini_search_engine.domain.model import Article
from mini_search_engine.search.inverted_index import InvertedIndex


logger = logging.getLogger(__name__)


class ArticleStore:
    """Owns articles and keeps the inverted index in step with them.

    Every mutation holds ``_lock`` for its full duration, including indexing,
    and readers that need a consistent view take it through ``read_lock()``.
    An id is therefore never visible before its article is fully indexed.
    """

    def __init__(
        self,
        index: InvertedIndex | None = None,
        repository: AbstractArticleRepository | None = None,
    ):
        self.index = index or InvertedIndex()
        self.repository = repository or InMemoryArticleRepository()
        self._lock = threading.RLock()
        self._next_id = self.repository.max_id() + 1
        if self.repository.count():
            self.index.rebuild(self.repository.list())

    @property
    def next_id(self) -> int:
        return self._next_id

    @contextmanager
    def read_lock(self) -> Iterator[None]:
        with self._lock:
            yield

    def add(self, title: str | None, content: str | None, tags: Iterable[str] | None = None) -> Article:
        """Create, store and index an article.

        Raises:
            ValidationError: title or content is missing or empty
        """
        if not title or not content:
            raise ValidationError("Title and content are required")

        with self._lock:
            article = Article.create(self._next_id, title, content, list(tags or []))
            self._next_id += 1
            self.repository.add(article)
            self.index.index_article(article)

        logger.info("Added article %d (%d tags)", article.id, len(article.tags))
        return article

    def get(self, article_id: int) -> Article:
        """Look up an article by id.

        Raises:
            NotFoundError: no article carries this id
        """
        with self._lock:
            article = self.repository.get(article_id)
        if article is None:
            raise NotFoundError(article_id)
        return article

    def load_from_snapshot(self, articles: Iterable[Article]) -> None:
        """Replace all articles, reset the id counter and rebuild the index."""
        with self._lock:
            self.repository.replace_all(articles)
            self._next_id = self.repository.max_id() + 1
            self.index.rebuild(self.repository.list())
            count = self.repository.count()
        logger.info("Loaded %d articles from snapshot (next id %d)", count, self._next_id)

    def list_articles(self) -> list[Article]:
        with self._lock:
            return self.repository.list()

    def count(self) -> int:
        with self._lock:
            return self.repository.count()
