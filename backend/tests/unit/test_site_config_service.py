"""Unit tests for the SiteConfigService and its in-memory mirror."""

import pytest

from blog.application.interfaces import SiteConfigRepository
from blog.application.services import SiteConfigService, SiteConfigState
from blog.domain.entities import AnalyticsConfig, CommentConfig, ObjectStorageConfig


class FakeSiteConfigRepository(SiteConfigRepository):
    """In-memory fake repository that counts reads."""

    def __init__(self):
        self.comments: CommentConfig | None = None
        self.analytics: AnalyticsConfig | None = None
        self.object_storage: ObjectStorageConfig | None = None
        self.reads = 0

    async def get_comment_config(self) -> CommentConfig | None:
        self.reads += 1
        return self.comments

    async def save_comment_config(self, config: CommentConfig) -> None:
        self.comments = config

    async def get_analytics_config(self) -> AnalyticsConfig | None:
        self.reads += 1
        return self.analytics

    async def save_analytics_config(self, config: AnalyticsConfig) -> None:
        self.analytics = config

    async def get_object_storage_config(self) -> ObjectStorageConfig | None:
        self.reads += 1
        return self.object_storage

    async def save_object_storage_config(self, config: ObjectStorageConfig) -> None:
        self.object_storage = config


@pytest.fixture
def repository() -> FakeSiteConfigRepository:
    return FakeSiteConfigRepository()


@pytest.fixture
def service(repository: FakeSiteConfigRepository) -> SiteConfigService:
    return SiteConfigService(repository, SiteConfigState())


def test_defaults_before_load(service: SiteConfigService):
    assert service.get_comment_config() == CommentConfig()
    assert service.get_analytics_config() == AnalyticsConfig()
    assert service.get_object_storage_config() == ObjectStorageConfig()


@pytest.mark.asyncio
async def test_seed_defaults_then_load(service: SiteConfigService, repository: FakeSiteConfigRepository):
    await service.seed_defaults()
    assert repository.comments == CommentConfig()

    repository.comments = CommentConfig(enable_comments=True, repo="me/blog")
    await service.load()

    assert service.get_comment_config().repo == "me/blog"


@pytest.mark.asyncio
async def test_reads_are_served_from_memory(service: SiteConfigService, repository: FakeSiteConfigRepository):
    await service.load()
    reads_after_load = repository.reads

    service.get_comment_config()
    service.get_analytics_config()
    service.get_object_storage_config()

    assert repository.reads == reads_after_load


@pytest.mark.asyncio
async def test_save_updates_store_and_mirror(service: SiteConfigService, repository: FakeSiteConfigRepository):
    config = AnalyticsConfig(enable_umami=True, script_url="https://umami.example/script.js", website_id="w1")

    await service.save_analytics_config(config)

    assert repository.analytics == config
    assert service.get_analytics_config() == config


@pytest.mark.asyncio
async def test_returned_config_is_a_copy(service: SiteConfigService):
    await service.save_object_storage_config(ObjectStorageConfig(bucket="photos"))

    copy = service.get_object_storage_config()
    copy.bucket = "changed"

    assert service.get_object_storage_config().bucket == "photos"


@pytest.mark.asyncio
async def test_services_share_state(repository: FakeSiteConfigRepository):
    state = SiteConfigState()
    writer = SiteConfigService(repository, state)
    reader = SiteConfigService(FakeSiteConfigRepository(), state)

    await writer.save_comment_config(CommentConfig(enable_comments=True))

    assert reader.get_comment_config().enable_comments is True
