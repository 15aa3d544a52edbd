"""Request schemas validated at the HTTP boundary."""

from pydantic import BaseModel, ConfigDict, field_validator


class CreateArticleRequest(BaseModel):
    """Body of ``POST /articles``.

    Title and content are optional here so that a missing field yields the
    domain "Title and content are required" error rather than a schema error.
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    content: str | None = None
    tags: list[str] = []

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, value: object) -> object:
        return [] if value is None else value


class SearchParams(BaseModel):
    """Query string of ``GET /articles/search``."""

    q: str | None = None
    sort: str = "relevance"
