"""Tests for the in-memory article repository."""

import pytest

from mini_search_engine.adapters.article_repository import AbstractArticleRepository, InMemoryArticleRepository


pytestmark = pytest.mark.unit


def test_is_abstract_repository():
    assert issubclass(InMemoryArticleRepository, AbstractArticleRepository)
    with pytest.raises(TypeError):
        AbstractArticleRepository()  # type: ignore[abstract]


def test_add_and_get(make_article):
    repo = InMemoryArticleRepository()
    article = make_article(1)
    repo.add(article)

    assert repo.get(1) is article
    assert repo.get(2) is None
    assert repo.count() == 1


def test_get_returns_first_match(make_article):
    first = make_article(1, title="first")
    repo = InMemoryArticleRepository([first, make_article(1, title="second")])

    assert repo.get(1) is first


def test_list_returns_copy_in_insertion_order(make_article):
    repo = InMemoryArticleRepository([make_article(2), make_article(1)])
    listed = repo.list()
    listed.clear()

    assert [a.id for a in repo.list()] == [2, 1]


def test_replace_all(make_article):
    repo = InMemoryArticleRepository([make_article(1)])
    repo.replace_all([make_article(7), make_article(3)])

    assert [a.id for a in repo.list()] == [7, 3]
    assert repo.get(1) is None


def test_max_id(make_article):
    assert InMemoryArticleRepository().max_id() == 0
    assert InMemoryArticleRepository([make_article(4), make_article(9), make_article(2)]).max_id() == 9
