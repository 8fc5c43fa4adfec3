"""Unit tests for the SQL issued by PostgresKeywordRepository."""

from datetime import UTC, datetime

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError

from oer.domain.error import StorageUnavailableError
from oer.domain.value import KeywordValue
from oer.persistence.repository import PostgresKeywordRepository


class FakeRow:
    def __init__(self, **values):
        self._values = values

    def _asdict(self):
        return dict(self._values)


class FakeResult:
    def __init__(self, row=None, rows=(), rowcount=0):
        self._row = row
        self._rows = list(rows)
        self.rowcount = rowcount

    def fetchone(self):
        return self._row

    def fetchall(self):
        return self._rows


class FakeSession:
    def __init__(self, *results, error=None):
        self._results = list(results)
        self._error = error
        self.statements = []

    async def execute(self, stmt):
        self.statements.append(stmt)
        if self._error is not None:
            raise self._error
        return self._results.pop(0)

    async def flush(self):
        pass


def compiled(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect()))


def keyword_row(value: str = "physics") -> FakeRow:
    return FakeRow(value=value, created_at=datetime.now(UTC))


class TestUpsert:
    """Tests for the upsert statement."""

    @pytest.mark.asyncio
    async def test_upsert_is_single_insert_on_conflict_statement(self):
        """Save should be one INSERT ... ON CONFLICT DO UPDATE ... RETURNING."""
        # Arrange
        session = FakeSession(FakeResult(row=keyword_row()))
        repo = PostgresKeywordRepository(session)

        # Act
        keyword = await repo.upsert(KeywordValue("Physics"))

        # Assert
        assert keyword.value.root == "physics"
        assert len(session.statements) == 1
        sql = compiled(session.statements[0])
        assert sql.startswith("INSERT INTO keywords")
        assert "ON CONFLICT (value) DO UPDATE" in sql
        assert "excluded.value" in sql
        assert "RETURNING" in sql

    @pytest.mark.asyncio
    async def test_upsert_binds_normalized_value(self):
        """The stored value should be the trimmed, lower-cased keyword."""
        # Arrange
        session = FakeSession(FakeResult(row=keyword_row("machine learning")))
        repo = PostgresKeywordRepository(session)

        # Act
        await repo.upsert(KeywordValue("  Machine Learning "))

        # Assert
        params = session.statements[0].compile(dialect=postgresql.dialect()).params
        assert params["value"] == "machine learning"


class TestInsert:
    """Tests for the insert-unless-present statement."""

    @pytest.mark.asyncio
    async def test_insert_uses_do_nothing_on_conflict(self):
        """A fresh keyword is inserted and returned."""
        # Arrange
        session = FakeSession(FakeResult(row=keyword_row("biology")))
        repo = PostgresKeywordRepository(session)

        # Act
        keyword = await repo.insert(KeywordValue("biology"))

        # Assert
        assert keyword is not None
        assert keyword.value.root == "biology"
        sql = compiled(session.statements[0])
        assert "ON CONFLICT (value) DO NOTHING" in sql
        assert "RETURNING" in sql

    @pytest.mark.asyncio
    async def test_insert_existing_returns_none(self):
        """No returned row means the keyword was already stored."""
        # Arrange
        session = FakeSession(FakeResult(row=None))
        repo = PostgresKeywordRepository(session)

        # Act
        keyword = await repo.insert(KeywordValue("biology"))

        # Assert
        assert keyword is None


class TestFindAndDelete:
    """Tests for find_all and delete_all."""

    @pytest.mark.asyncio
    async def test_find_all_maps_rows(self):
        """Every returned row becomes a Keyword."""
        # Arrange
        session = FakeSession(
            FakeResult(rows=[keyword_row("math"), keyword_row("physics")])
        )
        repo = PostgresKeywordRepository(session)

        # Act
        keywords = await repo.find_all()

        # Assert
        assert [k.value.root for k in keywords] == ["math", "physics"]
        assert compiled(session.statements[0]).startswith("SELECT")

    @pytest.mark.asyncio
    async def test_delete_all_reports_rowcount(self):
        """Delete all should issue one DELETE and return the affected rows."""
        # Arrange
        session = FakeSession(FakeResult(rowcount=3))
        repo = PostgresKeywordRepository(session)

        # Act
        removed = await repo.delete_all()

        # Assert
        assert removed == 3
        assert compiled(session.statements[0]).startswith("DELETE FROM keywords")

    @pytest.mark.asyncio
    async def test_sqlalchemy_error_becomes_storage_unavailable(self):
        """Driver failures should surface as StorageUnavailableError."""
        # Arrange
        error = OperationalError("SELECT 1", {}, Exception("connection refused"))
        repo = PostgresKeywordRepository(FakeSession(error=error))

        # Act & Assert
        with pytest.raises(StorageUnavailableError) as exc_info:
            await repo.upsert(KeywordValue("physics"))
        assert exc_info.value.operation == "keyword.upsert"
