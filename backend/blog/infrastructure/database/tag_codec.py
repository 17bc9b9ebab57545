"""Serialized tag column codec.

Tags live in a single TEXT column as a JSON array (``'["mysql","float"]'``).
Everything that reads or matches that column goes through this module so a
normalized tags table can replace it without touching callers.
"""

import json

from blog.domain.exceptions import ParseFailure

EMPTY_TAGS = "[]"


def encode_tags(tags: list[str] | None) -> str:
    """Serialize a tag list. ``None`` becomes the empty array."""
    return json.dumps(list(tags or []), ensure_ascii=False)


def decode_tags(raw: str | None, source: str = "<row>") -> list[str]:
    """Deserialize a tag column value.

    Raises:
        ParseFailure: the value is not JSON or not a JSON array.
    """
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ParseFailure("tags", source, str(exc)) from exc
    if not isinstance(value, list):
        raise ParseFailure("tags", source, f"expected an array, got {type(value).__name__}")
    return value


def escape_like(value: str, escape: str = "\\") -> str:
    """Escape LIKE wildcards so ``value`` only matches literally."""
    return (
        value.replace(escape, escape * 2)
        .replace("%", f"{escape}%")
        .replace("_", f"{escape}_")
    )


def tag_match_pattern(tag: str) -> str:
    """LIKE pattern matching ``tag`` as a whole JSON string token, never a substring."""
    return f"%{escape_like(json.dumps(tag, ensure_ascii=False))}%"
