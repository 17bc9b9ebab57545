"""Local filesystem adapter for the article tree.

Layout:
    <content_dir>/<slug>/index.md     — front matter + Markdown body
    <content_dir>/<slug>/<asset>      — optional images and attachments
"""

import logging
import shutil
from datetime import datetime, timezone
from pathlib import Path

from blog.application.interfaces import ArticleTree, TreeEntry
from blog.domain.entities.article import EPOCH_ISO
from blog.domain.exceptions import ConflictError, IOFailure, ValidationError

logger = logging.getLogger(__name__)

INDEX_FILE = "index.md"


def _iso(timestamp: float) -> str:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).isoformat(timespec="microseconds")


class LocalArticleTree(ArticleTree):
    """Infrastructure adapter storing one directory per article under ``base_dir``."""

    def __init__(self, base_dir: str | Path):
        self._base_dir = Path(base_dir).resolve()
        self._base_dir.mkdir(parents=True, exist_ok=True)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def resolve(self, slug: str) -> Path:
        """Absolute path of ``slug``; only direct children of the content root are accepted."""
        if not slug or not slug.strip():
            raise ValidationError("Article path must not be empty", field="path")
        candidate = (self._base_dir / slug).resolve()
        if candidate.parent != self._base_dir or candidate.name != slug:
            raise ValidationError(f"Path '{slug}' is not a direct child of the content directory", field="path")
        return candidate

    # ── Read ────────────────────────────────────────────────────────

    async def list_entries(self) -> list[TreeEntry]:
        try:
            children = sorted(self._base_dir.iterdir())
        except OSError as exc:
            raise IOFailure("list", str(self._base_dir), exc) from exc

        entries: list[TreeEntry] = []
        for child in children:
            try:
                if not child.is_dir():
                    continue
                stats = child.stat()
            except OSError as exc:
                logger.error("Could not stat %s: %s", child, exc)
                entries.append(TreeEntry(slug=child.name, modify_time=EPOCH_ISO, created_time=EPOCH_ISO))
                continue
            created = getattr(stats, "st_birthtime", stats.st_ctime)
            entries.append(
                TreeEntry(
                    slug=child.name,
                    modify_time=_iso(stats.st_mtime),
                    created_time=_iso(created),
                )
            )
        return entries

    async def exists(self, slug: str) -> bool:
        return self.resolve(slug).exists()

    async def has_document(self, slug: str) -> bool:
        return (self.resolve(slug) / INDEX_FILE).is_file()

    async def read_document(self, slug: str) -> str:
        path = self.resolve(slug) / INDEX_FILE
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise IOFailure("read", str(path), exc) from exc

    # ── Write ───────────────────────────────────────────────────────

    async def write_document(self, slug: str, text: str) -> None:
        directory = self.resolve(slug)
        path = directory / INDEX_FILE
        try:
            directory.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise IOFailure("write", str(path), exc) from exc
        logger.info("Wrote %s (%d chars)", path, len(text))

    async def rename(self, original: str, target: str) -> None:
        source = self.resolve(original)
        destination = self.resolve(target)
        if source == destination:
            return
        if not source.exists():
            raise ValidationError(f"Original path '{original}' does not exist", field="originalPath")
        if not source.is_dir():
            raise ValidationError(f"Original path '{original}' is not a directory", field="originalPath")
        try:
            if destination.exists():
                logger.warning("%s", ConflictError(target))
                if destination.is_dir():
                    shutil.rmtree(destination)
                else:
                    destination.unlink()
            source.rename(destination)
        except OSError as exc:
            raise IOFailure("rename", f"{source} -> {destination}", exc) from exc
        logger.info("Renamed %s -> %s", source, destination)

    async def remove(self, slug: str) -> str:
        path = self.resolve(slug)
        try:
            if path.is_dir():
                shutil.rmtree(path)
                kind = "directory"
            else:
                path.unlink()
                kind = "file"
        except OSError as exc:
            raise IOFailure("remove", str(path), exc) from exc
        logger.info("Removed %s %s", kind, path)
        return kind
