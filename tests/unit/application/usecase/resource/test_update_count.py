"""Unit tests for UpdateCountUseCase."""

import pytest

from oer.application.usecase.resource import (
    SaveResourceRequest,
    SaveResourceUseCase,
    UpdateCountRequest,
    UpdateCountUseCase,
)
from oer.domain.error import NotFoundError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateCountUseCase:
    """Tests for UpdateCountUseCase."""

    @pytest.mark.asyncio
    async def test_decrement_above_one_reports_update(self, unit_env):
        """Lowering a count above one keeps the OER."""
        # Arrange
        save = await unit_env.get(SaveResourceUseCase)
        update_count = await unit_env.get(UpdateCountUseCase)
        request = SaveResourceRequest(id="oer-1", title="Intro")
        await save.execute(request)
        await save.execute(request)

        # Act
        response = await update_count.execute(UpdateCountRequest(resource_id="oer-1"))

        # Assert
        assert response.message == "OER count updated successfully."

    @pytest.mark.asyncio
    async def test_decrement_last_use_reports_removal(self, unit_env):
        """Lowering the last use removes the OER and says so."""
        # Arrange
        save = await unit_env.get(SaveResourceUseCase)
        update_count = await unit_env.get(UpdateCountUseCase)
        await save.execute(SaveResourceRequest(id="oer-1", title="Intro"))

        # Act
        response = await update_count.execute(UpdateCountRequest(resource_id="oer-1"))

        # Assert
        assert response.message == "OER count reached zero, OER removed successfully."

    @pytest.mark.asyncio
    async def test_decrement_missing_raises_not_found(self, unit_env):
        """Unknown ids propagate NotFoundError."""
        # Arrange
        update_count = await unit_env.get(UpdateCountUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await update_count.execute(UpdateCountRequest(resource_id="missing"))
