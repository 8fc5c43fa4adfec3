"""PostgreSQL implementation of Keyword repository."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from oer.domain.model.keyword import Keyword
from oer.domain.repository.keyword import KeywordRepository
from oer.domain.value import KeywordValue
from oer.persistence.error import translate_storage_errors
from oer.persistence.mappers import row_to_keyword
from oer.persistence.tables import keywords_table


class PostgresKeywordRepository(KeywordRepository):
    """PostgreSQL implementation of KeywordRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    @translate_storage_errors("keyword.upsert")
    async def upsert(self, value: KeywordValue) -> Keyword:
        """Find or create the keyword with one INSERT ... ON CONFLICT statement."""
        insert_stmt = pg_insert(keywords_table).values(value=value.root)
        # DO UPDATE (not DO NOTHING) so RETURNING yields the row either way
        stmt = insert_stmt.on_conflict_do_update(
            index_elements=[keywords_table.c.value],
            set_={"value": insert_stmt.excluded.value},
        ).returning(*keywords_table.c)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_keyword(row._asdict())

    @translate_storage_errors("keyword.insert")
    async def insert(self, value: KeywordValue) -> Optional[Keyword]:
        """Create the keyword unless it already exists."""
        stmt = (
            pg_insert(keywords_table)
            .values(value=value.root)
            .on_conflict_do_nothing(index_elements=[keywords_table.c.value])
            .returning(*keywords_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_keyword(row._asdict()) if row else None

    @translate_storage_errors("keyword.find_all")
    async def find_all(self) -> list[Keyword]:
        """Find all keywords."""
        stmt = select(keywords_table)
        result = await self.session.execute(stmt)
        return [row_to_keyword(row._asdict()) for row in result.fetchall()]

    @translate_storage_errors("keyword.delete_all")
    async def delete_all(self) -> int:
        """Delete every keyword."""
        result = await self.session.execute(delete(keywords_table))
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
