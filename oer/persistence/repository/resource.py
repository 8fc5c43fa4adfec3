"""PostgreSQL implementation of Resource repository."""

from typing import Optional

import logfire
from sqlalchemy import delete, desc, func, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from oer.domain.model.resource import Resource
from oer.domain.repository.resource import ResourceRepository
from oer.domain.value import ResourceId
from oer.persistence.error import translate_storage_errors
from oer.persistence.mappers import row_to_resource
from oer.persistence.tables import resources_table

# "count" clashes with the ColumnCollection API, so look it up by key
count_column = resources_table.c["count"]


class PostgresResourceRepository(ResourceRepository):
    """PostgreSQL implementation of ResourceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_storage_errors("resource.upsert")
    async def upsert(
        self,
        resource_id: ResourceId,
        title: str,
        description: str | None,
        initial_count: int,
    ) -> Resource:
        """Create the resource or bump its count in a single statement."""
        with logfire.span("resource_repository.upsert", resource_id=resource_id):
            insert_stmt = pg_insert(resources_table).values(
                id=resource_id,
                title=title,
                description=description,
                count=initial_count,
                likes=0,
            )
            stmt = insert_stmt.on_conflict_do_update(
                index_elements=[resources_table.c.id],
                set_={
                    "count": count_column + 1,
                    "title": insert_stmt.excluded.title,
                    # Keep the stored description when none was sent
                    "description": func.coalesce(
                        insert_stmt.excluded.description,
                        resources_table.c.description,
                    ),
                    "updated_at": func.now(),
                },
            ).returning(*resources_table.c)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_resource(row._asdict())

    @translate_storage_errors("resource.find_by_id")
    async def find_by_id(self, resource_id: ResourceId) -> Optional[Resource]:
        """Find a resource by id."""
        stmt = select(resources_table).where(resources_table.c.id == resource_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_resource(row._asdict()) if row else None

    @translate_storage_errors("resource.decrement_count")
    async def decrement_count(self, resource_id: ResourceId) -> Optional[int]:
        """Lower the count, deleting the record when it runs out.

        The row stays locked (SELECT ... FOR UPDATE) until the request
        transaction ends, so two decrements of the same id are serialized.
        """
        with logfire.span(
            "resource_repository.decrement_count", resource_id=resource_id
        ):
            lock_stmt = (
                select(count_column)
                .where(resources_table.c.id == resource_id)
                .with_for_update()
            )
            result = await self.session.execute(lock_stmt)
            current = result.scalar_one_or_none()

            if current is None:
                return None

            if current <= 1:
                await self.session.execute(
                    delete(resources_table).where(resources_table.c.id == resource_id)
                )
                await self.session.flush()
                return 0

            update_stmt = (
                update(resources_table)
                .where(resources_table.c.id == resource_id)
                .values(count=count_column - 1, updated_at=func.now())
                .returning(count_column)
            )
            result = await self.session.execute(update_stmt)
            await self.session.flush()
            return result.scalar_one()

    @translate_storage_errors("resource.reset_all_counts")
    async def reset_all_counts(self) -> int:
        """Set every count to zero in one bulk UPDATE."""
        stmt = update(resources_table).values(count=0, updated_at=func.now())
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    @translate_storage_errors("resource.increment_likes")
    async def increment_likes(self, resource_id: ResourceId) -> Optional[int]:
        """Atomically add one like."""
        stmt = (
            update(resources_table)
            .where(resources_table.c.id == resource_id)
            .values(likes=resources_table.c.likes + 1)
            .returning(resources_table.c.likes)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none()

    @translate_storage_errors("resource.decrement_likes")
    async def decrement_likes(self, resource_id: ResourceId) -> Optional[int]:
        """Atomically remove one like, floored at zero."""
        stmt = (
            update(resources_table)
            .where(resources_table.c.id == resource_id)
            .values(likes=func.greatest(resources_table.c.likes - 1, 0))
            .returning(resources_table.c.likes)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none()

    @translate_storage_errors("resource.find_top_by_count")
    async def find_top_by_count(self, limit: int) -> list[Resource]:
        """Find the resources with the highest counts."""
        stmt = select(resources_table).order_by(desc(count_column)).limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_resource(row._asdict()) for row in result.fetchall()]

    @translate_storage_errors("resource.delete_all")
    async def delete_all(self) -> int:
        """Delete every resource."""
        result = await self.session.execute(delete(resources_table))
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
