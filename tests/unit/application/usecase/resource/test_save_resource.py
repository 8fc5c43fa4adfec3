"""Unit tests for SaveResourceUseCase and ListTopResourcesUseCase."""

import pytest

from oer.application.usecase.resource import (
    ListTopResourcesRequest,
    ListTopResourcesUseCase,
    SaveResourceRequest,
    SaveResourceUseCase,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSaveResourceUseCase:
    """Tests for SaveResourceUseCase."""

    @pytest.mark.asyncio
    async def test_save_returns_stored_oer(self, unit_env):
        """Response carries the message and the stored OER."""
        # Arrange
        save = await unit_env.get(SaveResourceUseCase)

        # Act
        response = await save.execute(
            SaveResourceRequest(id="oer-1", title="Intro", description="Basics")
        )

        # Assert
        assert response.message == "OER saved successfully."
        assert response.oer.id == "oer-1"
        assert response.oer.description == "Basics"
        assert response.oer.count == 1
        assert response.oer.likes == 0


class TestListTopResourcesUseCase:
    """Tests for ListTopResourcesUseCase."""

    @pytest.mark.asyncio
    async def test_response_serializes_under_camel_case_key(self, unit_env):
        """Top listing is returned under maxCountOERs."""
        # Arrange
        save = await unit_env.get(SaveResourceUseCase)
        list_top = await unit_env.get(ListTopResourcesUseCase)
        await save.execute(SaveResourceRequest(id="a", title="A"))
        await save.execute(SaveResourceRequest(id="b", title="B"))
        await save.execute(SaveResourceRequest(id="b", title="B"))

        # Act
        response = await list_top.execute(ListTopResourcesRequest(limit=1))

        # Assert
        payload = response.model_dump(by_alias=True)
        assert [item["id"] for item in payload["maxCountOERs"]] == ["b"]
