"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from oer.config import Settings
from oer.domain.error import StorageUnavailableError
from oer.domain.repository import (
    KeywordRepository,
    LearningDocumentRepository,
    ResourceRepository,
)
from oer.persistence.database import create_engine, create_session_factory
from oer.persistence.repository import (
    PostgresKeywordRepository,
    PostgresLearningDocumentRepository,
    PostgresResourceRepository,
)
from oer.util.di.base import ProviderBase
from oer.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL-backed repositories sharing one session per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """One engine per process, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request.

        Committed after the route returns; any error rolls it back. A failed
        commit is reported as StorageUnavailableError.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except SQLAlchemyError as e:
                logfire.warn("Request transaction rolled back", error=str(e))
                await session.rollback()
                raise StorageUnavailableError("commit", e) from e
            except Exception as e:
                logfire.warn("Request transaction rolled back", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_keyword_repository(self, session: AsyncSession) -> KeywordRepository:
        """Provide Keyword repository."""
        return PostgresKeywordRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_resource_repository(self, session: AsyncSession) -> ResourceRepository:
        """Provide Resource repository."""
        return PostgresResourceRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_document_repository(
        self, session: AsyncSession
    ) -> LearningDocumentRepository:
        """Provide LearningDocument repository."""
        return PostgresLearningDocumentRepository(session)
