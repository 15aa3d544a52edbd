"""Mini Search Engine - article store with keyword and tag search."""

from mini_search_engine.search_engine import MiniSearchEngine


__all__ = ["MiniSearchEngine"]
