"""HTTP-level tests: routers, auth, envelopes and camelCase payloads."""

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from blog.application.services import UserService, config_state
from blog.domain.entities import short_id_for
from blog.infrastructure.auth import StaticTokenAuthOracle
from blog.infrastructure.content import LocalArticleTree
from blog.infrastructure.database.repositories import SQLAlchemyUserRepository
from blog.infrastructure.database.session import get_db_session
from blog.infrastructure.dependencies import get_article_tree, get_auth_oracle
from blog.main import app

TOKEN = "test-token"
AUTH = {"Authorization": f"Bearer {TOKEN}"}

DOCUMENT = """---
title: Hello World
date: 2024-01-01
tags:
  - python
  - web
published: true
isSticky: false
---
# Hello

First post.
"""


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    return tmp_path / "articles"


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
    content_dir: Path,
) -> AsyncIterator[AsyncClient]:
    async def _session() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async with session_factory() as session:
        await UserService(SQLAlchemyUserRepository(session)).ensure_default_admin("admin", "admin123", "Admin")
        await session.commit()

    tree = LocalArticleTree(content_dir)
    app.dependency_overrides[get_db_session] = _session
    app.dependency_overrides[get_article_tree] = lambda: tree
    app.dependency_overrides[get_auth_oracle] = lambda: StaticTokenAuthOracle(TOKEN, 1)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
    config_state.comments = None
    config_state.analytics = None
    config_state.object_storage = None


async def _save(client: AsyncClient, path: str = "hello-world", content: str = DOCUMENT, **extra) -> dict:
    response = await client.put("/api/v1/articles", json={"path": path, "content": content, **extra}, headers=AUTH)
    assert response.status_code == 200
    return response.json()


# ── Auth ────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_admin_routes_require_token(client: AsyncClient):
    assert (await client.get("/api/v1/articles")).status_code == 401
    bad = await client.get("/api/v1/articles", headers={"Authorization": "Bearer nope"})
    assert bad.status_code == 401


@pytest.mark.asyncio
async def test_cookie_credential_is_accepted(client: AsyncClient):
    response = await client.get("/api/v1/articles", headers={"Cookie": f"auth.token={TOKEN}"})
    assert response.status_code == 200
    assert response.json()["success"] is True


# ── Articles ────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_save_then_list_published(client: AsyncClient, content_dir: Path):
    saved = await _save(client)
    assert saved["success"] is True
    assert saved["err"] == ""
    assert (content_dir / "hello-world" / "index.md").is_file()

    response = await client.get("/api/v1/blogs", params={"pageSize": 5, "tag": "python"})
    body = response.json()

    assert body["success"] is True
    assert body["data"]["total"] == 1
    item = body["data"]["list"][0]
    assert item["path"] == "hello-world"
    assert item["tags"] == ["python", "web"]
    assert item["isSticky"] is False
    assert item["shortId"] == short_id_for("hello-world")
    assert "modifyTime" in item


@pytest.mark.asyncio
async def test_save_new_draft_reports_failure(client: AsyncClient):
    result = await _save(client, "draft", "---\ntitle: Draft\ndate: 2024-01-01\npublished: false\n---\nwip\n")
    assert result["success"] is False
    assert result["err"]


@pytest.mark.asyncio
async def test_save_with_rename(client: AsyncClient, content_dir: Path):
    await _save(client)
    result = await _save(client, "renamed", DOCUMENT, originalPath="hello-world")

    assert result["success"] is True
    assert not (content_dir / "hello-world").exists()
    paths = [a["path"] for a in (await client.get("/api/v1/blogs")).json()["data"]["list"]]
    assert paths == ["renamed"]


@pytest.mark.asyncio
async def test_admin_listing_flags_unsaved_directories(client: AsyncClient, content_dir: Path):
    await _save(client)
    (content_dir / "loose").mkdir()

    data = (await client.get("/api/v1/articles", headers=AUTH)).json()["data"]

    flags = {a["path"]: a["isSaved"] for a in data}
    assert flags == {"hello-world": True, "loose": False}


@pytest.mark.asyncio
async def test_read_content_and_source(client: AsyncClient):
    await _save(client)

    content = (await client.post("/api/v1/blogs/content", json={"path": "hello-world"})).json()
    assert content["success"] is True
    assert "First post." in content["data"]["content"]
    assert content["data"]["frontMatter"]["title"] == "Hello World"
    assert content["data"]["author"]["name"] == "Admin"
    assert content["data"]["adjacent"] == {"prev": None, "next": None}

    source = (await client.post("/api/v1/articles/source", json={"path": "hello-world"}, headers=AUTH)).json()
    assert source["data"]["frontMatter"]["tags"] == ["python", "web"]


@pytest.mark.asyncio
async def test_delete_article(client: AsyncClient, content_dir: Path):
    await _save(client)

    response = await client.request("DELETE", "/api/v1/articles", json={"path": "hello-world"}, headers=AUTH)

    assert response.json() == {"success": True, "err": "", "data": {"deletedPath": "hello-world", "type": "directory"}}
    assert not (content_dir / "hello-world").exists()
    missing = await client.request("DELETE", "/api/v1/articles", json={"path": "hello-world"}, headers=AUTH)
    assert missing.json()["success"] is False


@pytest.mark.asyncio
async def test_rebuild_from_tree(client: AsyncClient, content_dir: Path):
    for slug in ("one", "two"):
        (content_dir / slug).mkdir(parents=True)
        (content_dir / slug / "index.md").write_text(DOCUMENT.replace("Hello World", slug), encoding="utf-8")

    result = (await client.post("/api/v1/articles/rebuild", headers=AUTH)).json()

    assert result["success"] is True
    assert result["data"]["count"] == 2
    tags = (await client.get("/api/v1/blogs/tags")).json()["data"]
    assert {"tag": "python", "count": 2} in tags


@pytest.mark.asyncio
async def test_recent_and_sticky(client: AsyncClient):
    await _save(client)
    await _save(client, "pinned", DOCUMENT.replace("isSticky: false", "isSticky: true"))

    recent = (await client.get("/api/v1/blogs/recent")).json()["data"]["list"]
    sticky = (await client.get("/api/v1/blogs/sticky")).json()["data"]["list"]

    assert [a["path"] for a in recent] == ["hello-world"]
    assert [a["path"] for a in sticky] == ["pinned"]


@pytest.mark.asyncio
async def test_short_link(client: AsyncClient):
    await _save(client)

    found = await client.get(f"/api/v1/s/{short_id_for('hello-world')}")
    assert found.json()["data"] == {"path": "hello-world"}
    assert (await client.get("/api/v1/s/unknown1")).status_code == 404


# ── Travel, settings, account ───────────────────────────────────────


@pytest.mark.asyncio
async def test_travel_records(client: AsyncClient):
    assert (await client.get("/api/v1/travel/records")).json() == {"success": True, "data": [], "visible": False}

    bad = await client.post("/api/v1/travel/records", json={"data": "{oops"}, headers=AUTH)
    assert bad.status_code == 400

    saved = await client.post("/api/v1/travel/records", json={"data": [{"name": "Paris"}]}, headers=AUTH)
    assert saved.json()["success"] is True
    assert (await client.get("/api/v1/travel/records")).json() == {
        "success": True,
        "data": [{"name": "Paris"}],
        "visible": True,
    }


@pytest.mark.asyncio
async def test_comment_config_round_trip(client: AsyncClient):
    payload = {"enableComments": True, "repo": "me/blog", "repoId": "R1", "category": "General", "categoryId": "C1"}

    assert (await client.post("/api/v1/comments/config", json=payload)).status_code == 401
    saved = await client.post("/api/v1/comments/config", json=payload, headers=AUTH)
    assert saved.json()["data"] == payload

    assert (await client.get("/api/v1/comments/config")).json()["data"] == payload


@pytest.mark.asyncio
async def test_object_storage_config_is_private(client: AsyncClient):
    assert (await client.get("/api/v1/s3/config")).status_code == 401
    response = await client.get("/api/v1/s3/config", headers=AUTH)
    assert response.json()["data"]["enableS3"] is False


@pytest.mark.asyncio
async def test_user_profile_and_password(client: AsyncClient):
    me = (await client.get("/api/v1/user", headers=AUTH)).json()
    assert me["username"] == "admin"
    assert "password" not in me

    updated = await client.post("/api/v1/user/profile", json={"bio": "Hi"}, headers=AUTH)
    assert updated.json()["data"]["bio"] == "Hi"

    wrong = await client.post(
        "/api/v1/auth/repassword", json={"currPassword": "nope", "newPassword": "x1"}, headers=AUTH
    )
    assert wrong.json()["success"] is False
    ok = await client.post(
        "/api/v1/auth/repassword", json={"currPassword": "admin123", "newPassword": "x1"}, headers=AUTH
    )
    assert ok.json() == {"success": True, "err": "", "data": None}
