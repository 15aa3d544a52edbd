"""Domain model - articles and scored search results.

Following Cosmic Python principles:
- Domain model has NO dependencies on infrastructure
- Articles are immutable once created (no update, no delete)
- Uses Pydantic models for validation at construction

The JSON form mirrors the snapshot file and HTTP payloads, so field aliases
use camelCase (``createdAt``, ``relevanceScore``).
"""

from datetime import datetime, timezone
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field


SORT_BY_RELEVANCE = "relevance"
SORT_BY_DATE = "date"


def utc_timestamp(moment: datetime | None = None) -> str:
    """Render an ISO-8601 UTC timestamp with millisecond precision and ``Z`` suffix."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Article(BaseModel):
    """Aggregate root for a stored article.

    Identity is the sequential integer ``id``. Frozen because articles are
    never mutated after creation.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(ge=1)
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    created_at: str = Field(alias="createdAt", min_length=1)

    @classmethod
    def create(cls, article_id: int, title: str, content: str, tags: list[str] | None = None) -> Self:
        """Factory stamping the creation time."""
        return cls(id=article_id, title=title, content=content, tags=list(tags or []), created_at=utc_timestamp())

    @property
    def searchable_text(self) -> str:
        """Text used for both keyword indexing and relevance scoring."""
        return f"{self.title} {self.content}"

    @property
    def created_at_datetime(self) -> datetime:
        return datetime.fromisoformat(self.created_at.replace("Z", "+00:00"))

    def to_dict(self) -> dict[str, Any]:
        """Serialize with wire/snapshot field names."""
        return self.model_dump(by_alias=True)


class ScoredArticle(Article):
    """An article decorated with its relevance score for one query."""

    relevance_score: int = Field(default=0, ge=0, alias="relevanceScore")

    @classmethod
    def from_article(cls, article: Article, score: int) -> Self:
        return cls(**article.model_dump(), relevance_score=score)
