"""Rebuilding the index from the article tree into a real SQLite database."""

from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from blog.application.services import ArticleService
from blog.infrastructure.content import LocalArticleTree
from blog.infrastructure.database.repositories import SQLAlchemyArticleRepository


def _write(tree: LocalArticleTree, slug: str, front_matter: str) -> None:
    directory = tree.base_dir / slug
    directory.mkdir()
    (directory / "index.md").write_text(f"---\n{front_matter}---\nBody of {slug}\n", encoding="utf-8")


@pytest.fixture
def tree(tmp_path: Path) -> LocalArticleTree:
    return LocalArticleTree(tmp_path / "articles")


@pytest.mark.asyncio
async def test_rebuild_survives_structured_front_matter_values(
    session: AsyncSession,
    session_factory: async_sessionmaker[AsyncSession],
    tree: LocalArticleTree,
):
    _write(tree, "good", "title: Good\ndate: 2024-01-01\npublished: true\ndescription: fine\n")
    _write(tree, "bad", "title: Bad\ndate: 2024-01-02\npublished: true\ndescription:\n  - a\nimage:\n  src: x.png\n")
    _write(tree, "broken", "title: [unclosed\n")

    service = ArticleService(SQLAlchemyArticleRepository(session), tree)
    assert await service.rebuild_index() == 2
    await session.commit()

    async with session_factory() as fresh:
        repository = SQLAlchemyArticleRepository(fresh)
        assert await repository.get_all_paths() == ["bad", "good"]
        good = await repository.get_by_path("good")
        assert good is not None and good.description == "fine"
        bad = await repository.get_by_path("bad")
        assert bad is not None and isinstance(bad.description, str)


@pytest.mark.asyncio
async def test_rebuild_replaces_stale_rows(session: AsyncSession, tree: LocalArticleTree):
    service = ArticleService(SQLAlchemyArticleRepository(session), tree)
    _write(tree, "kept", "title: Kept\ndate: 2024-01-01\npublished: true\n")
    assert await service.rebuild_index() == 1

    (tree.base_dir / "kept" / "index.md").unlink()
    (tree.base_dir / "kept").rmdir()
    _write(tree, "new", "title: New\ndate: 2024-02-01\npublished: true\n")

    assert await service.rebuild_index() == 1
    assert await service.get_all_article_paths() == ["new"]
