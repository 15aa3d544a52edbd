"""In-memory inverted index over article keywords and tags.

Buckets are plain lists: an article id is appended once per token
occurrence, so a word repeated in an article produces repeated ids. Search
pools ids into a set, so duplicates never change results, only memory use.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import logging

from mini_search_engine.domain.model import Article
from mini_search_engine.search.analyzers import get_analyzer


logger = logging.getLogger(__name__)


class InvertedIndex:
    """Keyword and tag postings keyed by lowercased token."""

    def __init__(self) -> None:
        self.keywords: dict[str, list[int]] = {}
        self.tags: dict[str, list[int]] = {}
        self._text_analyzer = get_analyzer("whitespace")
        self._tag_analyzer = get_analyzer("keyword")

    def index_article(self, article: Article) -> None:
        """Add postings for every token of title+content and every tag."""
        for token in self._text_analyzer(article.searchable_text):
            self.keywords.setdefault(token.text, []).append(article.id)

        for tag in article.tags:
            for token in self._tag_analyzer(tag):
                self.tags.setdefault(token.text, []).append(article.id)

    def rebuild(self, articles: Iterable[Article]) -> None:
        """Drop all postings and re-index ``articles`` in order."""
        self.keywords = {}
        self.tags = {}
        count = 0
        for article in articles:
            self.index_article(article)
            count += 1
        logger.debug("Rebuilt index from %d articles (%d keywords, %d tags)", count, len(self.keywords), len(self.tags))

    def lookup_keyword(self, term: str) -> Sequence[int]:
        return self.keywords.get(term.lower(), [])

    def lookup_tag(self, term: str) -> Sequence[int]:
        return self.tags.get(term.lower(), [])

    def stats(self) -> dict[str, int]:
        """Size counters for health reporting."""
        return {
            "keywords": len(self.keywords),
            "tags": len(self.tags),
            "postings": sum(len(ids) for ids in self.keywords.values())
            + sum(len(ids) for ids in self.tags.values()),
        }
