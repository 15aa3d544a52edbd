"""Shared test fixtures and configuration."""

import os
from pathlib import Path

import pytest
from starlette.testclient import TestClient


TEST_ENV = {
    "HOST": "127.0.0.1",
    "PORT": "3000",
    "LOG_LEVEL": "info",
    "LOG_JSON": "true",
    "ACCESS_LOG": "false",
    "SERVICE_NAME": "mini-search-engine-test",
}


# Set environment variables immediately when conftest.py is loaded
for key, value in TEST_ENV.items():
    os.environ[key] = value

from mini_search_engine.app import create_app
from mini_search_engine.config import Settings
from mini_search_engine.domain.model import Article
from mini_search_engine.search_engine import MiniSearchEngine


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Pin the environment and keep snapshots out of the working directory."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    monkeypatch.setenv("ARTICLES_FILE", str(tmp_path / "env-articles.json"))


@pytest.fixture
def snapshot_path(tmp_path) -> Path:
    return tmp_path / "articles.json"


@pytest.fixture
def test_settings(snapshot_path) -> Settings:
    return Settings(articles_file=snapshot_path)


@pytest.fixture
def engine(snapshot_path) -> MiniSearchEngine:
    return MiniSearchEngine(snapshot_path)


@pytest.fixture
def client(test_settings, engine):
    """TestClient with lifespan running; server errors come back as 500 responses."""
    app = create_app(test_settings, engine)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def make_article():
    """Factory for articles with explicit ids and timestamps."""

    def _make(
        article_id: int,
        title: str = "Title",
        content: str = "Content",
        tags: list[str] | None = None,
        created_at: str = "2024-01-01T00:00:00.000Z",
    ) -> Article:
        return Article(id=article_id, title=title, content=content, tags=tags or [], created_at=created_at)

    return _make


@pytest.fixture
def pets_articles(make_article) -> list[Article]:
    """The two-article corpus used across search scenarios."""
    return [
        make_article(
            1,
            "Cats and Dogs",
            "Cats are great pets",
            ["pets", "animals"],
            "2024-01-01T10:00:00.000Z",
        ),
        make_article(
            2,
            "Dog Training",
            "Training your dog",
            ["pets", "training"],
            "2024-01-02T10:00:00.000Z",
        ),
    ]
