"""Unit tests for front-matter parsing and rendering."""

import pytest

from blog.domain.exceptions import ParseFailure
from blog.infrastructure.content import parse_front_matter, render_document


def test_parse_extracts_metadata_and_body():
    metadata, body = parse_front_matter(
        "---\ntitle: Hello\ndate: 2024-01-02\ntags:\n  - a\n  - b\npublished: true\n---\n# Heading\n"
    )
    assert metadata["title"] == "Hello"
    assert metadata["date"] == "2024-01-02"
    assert metadata["tags"] == ["a", "b"]
    assert metadata["published"] is True
    assert body.strip() == "# Heading"


def test_parse_without_front_matter_returns_whole_text():
    metadata, body = parse_front_matter("Just text\n")
    assert metadata == {}
    assert body.strip() == "Just text"


def test_parse_invalid_yaml_raises_parse_failure():
    with pytest.raises(ParseFailure) as exc_info:
        parse_front_matter("---\ntitle: [oops\n---\nbody", source="bad-post")
    assert "bad-post" in str(exc_info.value)


def test_render_then_parse_keeps_fields():
    text = render_document({"title": "Café", "isSticky": True, "tags": ["x"]}, "Body")
    assert text.startswith("---\n")
    assert "Café" in text

    metadata, body = parse_front_matter(text)
    assert metadata == {"title": "Café", "isSticky": True, "tags": ["x"]}
    assert body.strip() == "Body"


def test_render_without_metadata_is_body_only():
    assert render_document({}, "plain body") == "plain body"
