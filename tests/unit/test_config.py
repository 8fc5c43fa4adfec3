"""Unit tests for Settings."""

from oer.config import (
    DuplicateKeywordPolicy,
    MissingResourcePolicy,
    Settings,
)


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        """Without overrides the strict policies apply."""
        # Arrange
        for name in [
            "STORE__INITIAL_COUNT",
            "STORE__MISSING_RESOURCE",
            "STORE__DUPLICATE_KEYWORD",
        ]:
            monkeypatch.delenv(name, raising=False)

        # Act
        settings = Settings(_env_file=None)

        # Assert
        assert settings.port == 3001
        assert settings.store.initial_count == 1
        assert settings.store.missing_resource == MissingResourcePolicy.NOT_FOUND
        assert settings.store.duplicate_keyword == DuplicateKeywordPolicy.UPSERT
        assert settings.cors.allow_origins == ["*"]

    def test_nested_environment_overrides(self, monkeypatch):
        """Policies can be switched with STORE__ variables."""
        # Arrange
        monkeypatch.setenv("STORE__INITIAL_COUNT", "0")
        monkeypatch.setenv("STORE__MISSING_RESOURCE", "default")
        monkeypatch.setenv("STORE__DUPLICATE_KEYWORD", "conflict")
        monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://u:p@db:5432/x")

        # Act
        settings = Settings(_env_file=None)

        # Assert
        assert settings.store.initial_count == 0
        assert settings.store.missing_resource == MissingResourcePolicy.DEFAULT
        assert settings.store.duplicate_keyword == DuplicateKeywordPolicy.CONFLICT
        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/x"
