"""Domain exceptions raised by the article store, index and search service."""


class SearchEngineError(Exception):
    """Base class for all engine errors."""


class ValidationError(SearchEngineError):
    """Required input (title, content or query) is missing or empty."""


class NotFoundError(SearchEngineError):
    """An article identifier does not resolve to a stored article."""

    def __init__(self, article_id: object):
        super().__init__(f"Article {article_id!r} not found")
        self.article_id = article_id


class PersistenceError(SearchEngineError):
    """Reading or writing the article snapshot failed."""

    def __init__(self, message: str, path: object | None = None):
        super().__init__(message)
        self.path = path
