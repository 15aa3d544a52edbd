"""Indexing and scoring primitives for article search."""

from mini_search_engine.search.analyzers import get_analyzer, tokenize
from mini_search_engine.search.inverted_index import InvertedIndex
from mini_search_engine.search.scoring import count_occurrences, relevance_score


__all__ = [
    "InvertedIndex",
    "count_occurrences",
    "get_analyzer",
    "relevance_score",
    "tokenize",
]
