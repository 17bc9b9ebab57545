"""Unit tests for listing-parameter normalization."""

import pytest

from blog.domain.entities import ArticleQuery
from blog.domain.entities.article import MAX_PAGE_SIZE


def test_defaults():
    query = ArticleQuery().normalized()
    assert (query.page, query.page_size, query.sort_by, query.sort_order) == (1, 10, "date", "desc")
    assert query.offset == 0


@pytest.mark.parametrize(
    ("page", "expected"),
    [(None, 1), ("abc", 1), (float("nan"), 1), (0, 1), (-4, 1), ("3", 3), (2.9, 2)],
)
def test_page_is_clamped(page, expected):
    assert ArticleQuery(page=page).normalized().page == expected


@pytest.mark.parametrize(
    ("page_size", "expected"),
    [(None, 10), ("", 10), (0, 10), (-1, 1), (5, 5), (1000, MAX_PAGE_SIZE), (float("inf"), 10)],
)
def test_page_size_is_clamped(page_size, expected):
    assert ArticleQuery(page_size=page_size).normalized().page_size == expected


def test_unknown_sort_field_falls_back_to_date():
    query = ArticleQuery(sort_by="password; DROP TABLE articles", sort_order="sideways").normalized()
    assert query.sort_by == "date"
    assert query.sort_order == "desc"


def test_sort_order_is_case_insensitive():
    assert ArticleQuery(sort_by="title", sort_order="ASC").normalized().sort_order == "asc"


def test_filters_are_stripped_and_offset_follows_page():
    query = ArticleQuery(page=3, page_size=20, search="  rust ", tag=" js ").normalized()
    assert query.search == "rust"
    assert query.tag == "js"
    assert query.offset == 40
