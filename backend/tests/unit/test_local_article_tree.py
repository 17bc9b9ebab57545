"""Unit tests for the filesystem article tree adapter."""

from pathlib import Path

import pytest

from blog.domain.entities.article import EPOCH_ISO
from blog.domain.exceptions import IOFailure, ValidationError
from blog.infrastructure.content import LocalArticleTree


@pytest.fixture
def tree(tmp_path: Path) -> LocalArticleTree:
    return LocalArticleTree(tmp_path / "content")


def test_creates_base_directory(tmp_path: Path):
    LocalArticleTree(tmp_path / "nested" / "content")
    assert (tmp_path / "nested" / "content").is_dir()


@pytest.mark.parametrize("slug", ["", "   ", "..", "../outside", "/etc", "a/b", "a/../b", "post/"])
def test_resolve_rejects_paths_outside_root(tree: LocalArticleTree, slug: str):
    with pytest.raises(ValidationError):
        tree.resolve(slug)


@pytest.mark.asyncio
async def test_list_entries_returns_directories_only(tree: LocalArticleTree):
    (tree.base_dir / "b-post").mkdir()
    (tree.base_dir / "a-post").mkdir()
    (tree.base_dir / "notes.txt").write_text("x", encoding="utf-8")

    entries = await tree.list_entries()

    assert [e.slug for e in entries] == ["a-post", "b-post"]
    assert all(e.modify_time > EPOCH_ISO for e in entries)


@pytest.mark.asyncio
async def test_write_and_read_document(tree: LocalArticleTree):
    await tree.write_document("post", "hello")

    assert await tree.exists("post")
    assert await tree.has_document("post")
    assert await tree.read_document("post") == "hello"


@pytest.mark.asyncio
async def test_read_missing_document_raises_io_failure(tree: LocalArticleTree):
    (tree.base_dir / "empty").mkdir()
    assert not await tree.has_document("empty")
    with pytest.raises(IOFailure):
        await tree.read_document("empty")


@pytest.mark.asyncio
async def test_rename_to_same_path_is_noop(tree: LocalArticleTree):
    await tree.write_document("same", "x")
    await tree.rename("same", "same")
    assert await tree.read_document("same") == "x"


@pytest.mark.asyncio
async def test_rename_rejects_file_source(tree: LocalArticleTree):
    (tree.base_dir / "file.md").write_text("x", encoding="utf-8")
    with pytest.raises(ValidationError):
        await tree.rename("file.md", "dir")


@pytest.mark.asyncio
async def test_remove_reports_kind(tree: LocalArticleTree):
    await tree.write_document("dir-post", "x")
    (tree.base_dir / "stray.md").write_text("x", encoding="utf-8")

    assert await tree.remove("dir-post") == "directory"
    assert await tree.remove("stray.md") == "file"
    assert not (tree.base_dir / "dir-post").exists()
    assert not (tree.base_dir / "stray.md").exists()


def test_resolve_accepts_direct_child(tree: LocalArticleTree):
    assert tree.resolve("post") == tree.base_dir / "post"


@pytest.mark.asyncio
async def test_list_entries_falls_back_to_epoch_when_stat_fails(
    tree: LocalArticleTree,
    monkeypatch: pytest.MonkeyPatch,
):
    (tree.base_dir / "ok").mkdir()
    (tree.base_dir / "locked").mkdir()
    locked = tree.base_dir / "locked"
    real_stat = Path.stat

    def stat(self, *args, **kwargs):
        if self == locked:
            raise PermissionError(13, "Permission denied")
        return real_stat(self, *args, **kwargs)

    monkeypatch.setattr(Path, "stat", stat)
    entries = {e.slug: e for e in await tree.list_entries()}

    assert set(entries) == {"locked", "ok"}
    assert entries["locked"].modify_time == EPOCH_ISO
    assert entries["locked"].created_time == EPOCH_ISO
    assert entries["ok"].modify_time > EPOCH_ISO
