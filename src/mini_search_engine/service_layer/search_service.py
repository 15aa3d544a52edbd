"""Search service orchestration layer.

Tokenizes the query, gathers candidates from the inverted index, scores them
and orders the results.
"""

from __future__ import annotations

import logging

from mini_search_engine.domain.exceptions import ValidationError
from mini_search_engine.domain.model import SORT_BY_DATE, SORT_BY_RELEVANCE, ScoredArticle
from mini_search_engine.search.analyzers import get_analyzer, tokenize
from mini_search_engine.search.scoring import relevance_score
from mini_search_engine.service_layer.article_store import ArticleStore


logger = logging.getLogger(__name__)


class SearchService:
    """Keyword and tag search over an ArticleStore's index."""

    def __init__(self, store: ArticleStore):
        self.store = store
        self._analyzer = get_analyzer("whitespace")

    def search(self, query: str | None, sort_by: str = SORT_BY_RELEVANCE) -> list[ScoredArticle]:
        """Execute a search.

        Args:
            query: Raw query text; tokens are whitespace-separated and lowercased
            sort_by: ``"relevance"`` (score, descending), ``"date"`` (newest first);
                any other value keeps store order

        Returns:
            Every article matching at least one token, as a keyword or a tag

        Raises:
            ValidationError: query is missing or empty
        """
        if not query:
            raise ValidationError("Search query is required")

        terms = tokenize(query, self._analyzer)

        with self.store.read_lock():
            candidate_ids: set[int] = set()
            for term in terms:
                candidate_ids.update(self.store.index.lookup_keyword(term))
                candidate_ids.update(self.store.index.lookup_tag(term))

            candidates = [article for article in self.store.list_articles() if article.id in candidate_ids]

        results = [ScoredArticle.from_article(article, relevance_score(article, terms)) for article in candidates]

        if sort_by == SORT_BY_RELEVANCE:
            results.sort(key=lambda result: result.relevance_score, reverse=True)
        elif sort_by == SORT_BY_DATE:
            results.sort(key=lambda result: result.created_at_datetime, reverse=True)

        logger.debug("Search %r (%d terms, sort=%s) -> %d results", query, len(terms), sort_by, len(results))
        return results
