"""Unit tests for the SQL issued by PostgresResourceRepository.

A stand-in session records statements and replays canned results, so the
single-statement upserts and locking can be checked without a database.
"""

from datetime import UTC, datetime

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError

from oer.domain.error import StorageUnavailableError
from oer.domain.value import ResourceId
from oer.persistence.repository import PostgresResourceRepository


class FakeRow:
    def __init__(self, **values):
        self._values = values

    def _asdict(self):
        return dict(self._values)


class FakeResult:
    def __init__(self, row=None, scalar=None, rows=(), rowcount=0):
        self._row = row
        self._scalar = scalar
        self._rows = list(rows)
        self.rowcount = rowcount

    def fetchone(self):
        return self._row

    def fetchall(self):
        return self._rows

    def scalar_one_or_none(self):
        return self._scalar

    def scalar_one(self):
        return self._scalar


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


def resource_row(count: int = 1, likes: int = 0) -> FakeRow:
    now = datetime.now(UTC)
    return FakeRow(
        id="oer-1",
        title="Intro",
        description=None,
        count=count,
        likes=likes,
        created_at=now,
        updated_at=now,
    )


class TestUpsert:
    """Tests for the upsert statement."""

    @pytest.mark.asyncio
    async def test_upsert_is_single_insert_on_conflict_statement(self):
        """Save should be one INSERT ... ON CONFLICT DO UPDATE ... RETURNING."""
        # Arrange
        session = FakeSession(FakeResult(row=resource_row(count=2)))
        repo = PostgresResourceRepository(session)

        # Act
        resource = await repo.upsert(ResourceId("oer-1"), "Intro", None, 1)

        # Assert
        assert resource.count == 2
        assert len(session.statements) == 1
        sql = compiled(session.statements[0])
        assert sql.startswith("INSERT INTO resources")
        assert "ON CONFLICT (id) DO UPDATE" in sql
        assert "coalesce(excluded.description, resources.description)" in sql
        assert "RETURNING" in sql


class TestDecrementCount:
    """Tests for decrement_count."""

    @pytest.mark.asyncio
    async def test_missing_row_returns_none(self):
        """No locked row means the resource does not exist."""
        # Arrange
        session = FakeSession(FakeResult(scalar=None))
        repo = PostgresResourceRepository(session)

        # Act
        result = await repo.decrement_count(ResourceId("oer-1"))

        # Assert
        assert result is None
        assert "FOR UPDATE" in compiled(session.statements[0])
        assert len(session.statements) == 1

    @pytest.mark.asyncio
    async def test_last_use_deletes_row(self):
        """Count 1 should lead to a DELETE of the locked row."""
        # Arrange
        session = FakeSession(FakeResult(scalar=1), FakeResult(rowcount=1))
        repo = PostgresResourceRepository(session)

        # Act
        result = await repo.decrement_count(ResourceId("oer-1"))

        # Assert
        assert result == 0
        assert compiled(session.statements[1]).startswith("DELETE FROM resources")

    @pytest.mark.asyncio
    async def test_higher_count_updates_row(self):
        """Count above 1 should lead to an UPDATE returning the new count."""
        # Arrange
        session = FakeSession(FakeResult(scalar=3), FakeResult(scalar=2))
        repo = PostgresResourceRepository(session)

        # Act
        result = await repo.decrement_count(ResourceId("oer-1"))

        # Assert
        assert result == 2
        sql = compiled(session.statements[1])
        assert sql.startswith("UPDATE resources")
        assert "RETURNING" in sql


class TestLikes:
    """Tests for like statements."""

    @pytest.mark.asyncio
    async def test_decrement_likes_is_floored_in_sql(self):
        """Unlike should clamp at zero inside the UPDATE itself."""
        # Arrange
        session = FakeSession(FakeResult(scalar=0))
        repo = PostgresResourceRepository(session)

        # Act
        result = await repo.decrement_likes(ResourceId("oer-1"))

        # Assert
        assert result == 0
        assert "greatest(resources.likes -" in compiled(session.statements[0])

    @pytest.mark.asyncio
    async def test_increment_likes_on_missing_row_returns_none(self):
        """An UPDATE matching nothing reports the resource missing."""
        # Arrange
        session = FakeSession(FakeResult(scalar=None))
        repo = PostgresResourceRepository(session)

        # Act
        result = await repo.increment_likes(ResourceId("missing"))

        # Assert
        assert result is None


class TestStorageErrors:
    """Tests for storage failure translation."""

    @pytest.mark.asyncio
    async def test_sqlalchemy_error_becomes_storage_unavailable(self):
        """Driver failures should surface as StorageUnavailableError."""
        # Arrange
        error = OperationalError("SELECT 1", {}, Exception("connection refused"))
        repo = PostgresResourceRepository(FakeSession(error=error))

        # Act & Assert
        with pytest.raises(StorageUnavailableError) as exc_info:
            await repo.find_by_id(ResourceId("oer-1"))
        assert exc_info.value.operation == "resource.find_by_id"
        assert exc_info.value.cause is error
