"""Article repository abstraction and in-memory implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from mini_search_engine.domain.model import Article


class AbstractArticleRepository(ABC):
    """Abstract repository for the Article aggregate."""

    @abstractmethod
    def add(self, article: Article) -> None:
        """Append an article."""
        raise NotImplementedError

    @abstractmethod
    def get(self, article_id: int) -> Article | None:
        """Get an article by id, or None."""
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[Article]:
        """All articles in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def replace_all(self, articles: Iterable[Article]) -> None:
        """Replace the whole article set."""
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def max_id(self) -> int:
        """Largest stored id, 0 when empty."""
        raise NotImplementedError


class InMemoryArticleRepository(AbstractArticleRepository):
    """List-backed repository.

    Lookups are a linear scan returning the first match.
    """

    def __init__(self, articles: Iterable[Article] | None = None):
        self._articles: list[Article] = list(articles or [])

    def add(self, article: Article) -> None:
        self._articles.append(article)

    def get(self, article_id: int) -> Article | None:
        for article in self._articles:
            if article.id == article_id:
                return article
        return None

    def list(self) -> list[Article]:
        return list(self._articles)

    def replace_all(self, articles: Iterable[Article]) -> None:
        self._articles = list(articles)

    def count(self) -> int:
        return len(self._articles)

    def max_id(self) -> int:
        return max((article.id for article in self._articles), default=0)
