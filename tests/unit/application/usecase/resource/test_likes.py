"""Unit tests for the like use cases."""

import pytest

from oer.application.usecase.resource import (
    GetLikesRequest,
    GetLikesUseCase,
    LikeRequest,
    LikeResourceUseCase,
    SaveResourceRequest,
    SaveResourceUseCase,
    UnlikeResourceUseCase,
)
from oer.config import MissingResourcePolicy, StoreSettings
from oer.domain.error import NotFoundError
from oer.domain.service import ResourceService
from oer.domain.value import ResourceId
from oer.persistence.repository.inmemory import InMemoryResourceRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def lenient_service() -> ResourceService:
    """Service that ignores missing resources instead of raising."""
    return ResourceService(
        resource_repository=InMemoryResourceRepository(),
        store_settings=StoreSettings(missing_resource=MissingResourcePolicy.DEFAULT),
    )


class TestLikeUseCases:
    """Tests for LikeResourceUseCase, UnlikeResourceUseCase and GetLikesUseCase."""

    @pytest.mark.asyncio
    async def test_like_then_unlike_existing_oer(self, unit_env):
        """Liking and unliking a saved OER reports success and moves the count."""
        # Arrange
        save = await unit_env.get(SaveResourceUseCase)
        like = await unit_env.get(LikeResourceUseCase)
        unlike = await unit_env.get(UnlikeResourceUseCase)
        get_likes = await unit_env.get(GetLikesUseCase)
        await save.execute(SaveResourceRequest(id="oer-1", title="Intro"))

        # Act
        liked = await like.execute(LikeRequest(resource_id="oer-1"))
        await like.execute(LikeRequest(resource_id="oer-1"))
        unliked = await unlike.execute(LikeRequest(resource_id="oer-1"))
        likes = await get_likes.execute(GetLikesRequest(resource_id="oer-1"))

        # Assert
        assert liked.message == "OER liked successfully."
        assert unliked.message == "OER like removed successfully."
        assert likes.likes == 1

    @pytest.mark.asyncio
    async def test_like_missing_oer_raises_not_found(self, unit_env):
        """Under the default settings an unknown id propagates NotFoundError."""
        # Arrange
        like = await unit_env.get(LikeResourceUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await like.execute(LikeRequest(resource_id="missing"))

    @pytest.mark.asyncio
    async def test_like_missing_oer_when_ignored_says_nothing_changed(self):
        """An ignored like must not claim the OER was liked."""
        # Arrange
        service = lenient_service()
        like = LikeResourceUseCase(service)
        unlike = UnlikeResourceUseCase(service)

        # Act
        liked = await like.execute(LikeRequest(resource_id="missing"))
        unliked = await unlike.execute(LikeRequest(resource_id="missing"))

        # Assert
        assert liked.message == "OER not found, nothing changed."
        assert unliked.message == "OER not found, nothing changed."
        assert await service.get_likes(ResourceId("missing")) == 0
