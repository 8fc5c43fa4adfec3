"""Unit tests for LearningDocumentService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from oer.domain.error import NotFoundError
from oer.domain.service import LearningDocumentService
from oer.domain.value import DocumentId, DocumentKind
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestLearningDocumentService:
    """Tests for LearningDocumentService."""

    @pytest.mark.asyncio
    async def test_save_then_get_returns_content_unchanged(self, unit_env):
        """Stored content should come back verbatim."""
        # Arrange
        document_service = await unit_env.get(LearningDocumentService)
        content = {
            "title": "Photosynthesis",
            "steps": [{"order": 1, "oer": "oer-1"}, {"order": 2, "oer": "oer-7"}],
            "meta": {"level": "beginner", "tags": ["biology"]},
        }

        # Act
        saved = await document_service.save_document(
            DocumentKind.LEARNING_SCENARIO, content
        )
        fetched = await document_service.get_document(
            DocumentKind.LEARNING_SCENARIO, saved.id
        )

        # Assert
        assert fetched.content == content
        assert fetched.kind == DocumentKind.LEARNING_SCENARIO

    @pytest.mark.asyncio
    async def test_saved_document_timestamp_is_utc(self, unit_env):
        """Creation time should be timezone aware and in UTC."""
        # Arrange
        document_service = await unit_env.get(LearningDocumentService)

        # Act
        saved = await document_service.save_document(DocumentKind.LEARNING_PATH, {})

        # Assert
        assert saved.created_at.tzinfo is not None
        assert saved.created_at.utcoffset() == timedelta(0)

    @pytest.mark.asyncio
    async def test_list_documents_filters_by_kind(self, unit_env):
        """Scenarios and paths are listed separately."""
        # Arrange
        document_service = await unit_env.get(LearningDocumentService)
        await document_service.save_document(DocumentKind.LEARNING_SCENARIO, {"n": 1})
        await document_service.save_document(DocumentKind.LEARNING_PATH, {"n": 2})
        await document_service.save_document(DocumentKind.LEARNING_PATH, {"n": 3})

        # Act
        scenarios = await document_service.list_documents(
            DocumentKind.LEARNING_SCENARIO
        )
        paths = await document_service.list_documents(DocumentKind.LEARNING_PATH)

        # Assert
        assert [d.content for d in scenarios] == [{"n": 1}]
        assert sorted(d.content["n"] for d in paths) == [2, 3]

    @pytest.mark.asyncio
    async def test_get_with_wrong_kind_raises_not_found(self, unit_env):
        """A path is not reachable through the scenario lookup."""
        # Arrange
        document_service = await unit_env.get(LearningDocumentService)
        path = await document_service.save_document(
            DocumentKind.LEARNING_PATH, {"n": 1}
        )

        # Act & Assert
        with pytest.raises(NotFoundError, match="Learning scenario"):
            await document_service.get_document(
                DocumentKind.LEARNING_SCENARIO, path.id
            )

    @pytest.mark.asyncio
    async def test_get_unknown_id_raises_not_found(self, unit_env):
        """Unknown ids are reported missing."""
        # Arrange
        document_service = await unit_env.get(LearningDocumentService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await document_service.get_document(
                DocumentKind.LEARNING_PATH, DocumentId(uuid4())
            )
