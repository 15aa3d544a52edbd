"""Domain layer - pure business objects with no infrastructure dependencies.

Contains:
- Entities: Article (identity = sequential integer id)
- Transient values: ScoredArticle
- Domain errors: ValidationError, NotFoundError, PersistenceError
"""

from mini_search_engine.domain.exceptions import (
    NotFoundError,
    PersistenceError,
    SearchEngineError,
    ValidationError,
)
from mini_search_engine.domain.model import (
    SORT_BY_DATE,
    SORT_BY_RELEVANCE,
    Article,
    ScoredArticle,
    utc_timestamp,
)


__all__ = [
    "SORT_BY_DATE",
    "SORT_BY_RELEVANCE",
    "Article",
    "NotFoundError",
    "PersistenceError",
    "ScoredArticle",
    "SearchEngineError",
    "ValidationError",
    "utc_timestamp",
]
