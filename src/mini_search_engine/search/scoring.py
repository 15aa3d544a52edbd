"""Relevance scoring by substring-occurrence counting.

The score is not a whole-word match count: ``"cat"`` also counts inside
``"category"``. Terms are matched literally, never as patterns.
"""

from collections.abc import Iterable

from mini_search_engine.domain.model import Article


def count_occurrences(haystack: str, needle: str) -> int:
    """Count possibly overlapping occurrences of ``needle`` in ``haystack``."""
    if not needle:
        return 0
    count = 0
    start = haystack.find(needle)
    while start != -1:
        count += 1
        start = haystack.find(needle, start + 1)
    return count


def relevance_score(article: Article, terms: Iterable[str]) -> int:
    """Sum case-insensitive occurrence counts of every term in title + content."""
    text = article.searchable_text.lower()
    return sum(count_occurrences(text, term.lower()) for term in terms)
