"""Helpers for parsing and rendering YAML front matter in index.md files."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any

import frontmatter
import yaml

from blog.domain.exceptions import ParseFailure

logger = logging.getLogger(__name__)


def _normalize_value(value: Any) -> Any:
    """YAML turns bare dates into date/datetime objects; keep them as ISO strings."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def parse_front_matter(content: str, source: str = "<string>") -> tuple[dict[str, Any], str]:
    """Split a Markdown document into (metadata, body).

    Raises:
        ParseFailure: the front-matter block is not valid YAML or not a mapping.
    """
    try:
        parsed = frontmatter.loads(content)
    except (yaml.YAMLError, ValueError, TypeError) as exc:
        raise ParseFailure("front matter", source, str(exc)) from exc

    raw_metadata = parsed.metadata or {}
    if not isinstance(raw_metadata, dict):
        raise ParseFailure("front matter", source, f"expected a mapping, got {type(raw_metadata).__name__}")

    metadata = {str(key): _normalize_value(value) for key, value in raw_metadata.items()}
    body = parsed.content if isinstance(parsed.content, str) else str(parsed.content)
    return metadata, body


def render_document(metadata: dict[str, Any], body: str) -> str:
    """Serialize metadata + body back into a front-matter Markdown document."""
    if not metadata:
        return body
    post = frontmatter.Post(body, **metadata)
    return frontmatter.dumps(post, sort_keys=False, allow_unicode=True) + "\n"
