"""PostgreSQL implementation of LearningDocument repository."""

from typing import Optional

from sqlalchemy import desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from oer.domain.model.document import LearningDocument
from oer.domain.repository.document import LearningDocumentRepository
from oer.domain.value import DocumentId, DocumentKind
from oer.persistence.error import translate_storage_errors
from oer.persistence.mappers import document_to_dict, row_to_document
from oer.persistence.tables import learning_documents_table


class PostgresLearningDocumentRepository(LearningDocumentRepository):
    """PostgreSQL implementation of LearningDocumentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    @translate_storage_errors("document.save")
    async def save(self, document: LearningDocument) -> LearningDocument:
        """Store a new document."""
        stmt = insert(learning_documents_table).values(**document_to_dict(document))
        await self.session.execute(stmt)
        await self.session.flush()
        return document

    @translate_storage_errors("document.find_by_id")
    async def find_by_id(
        self, kind: DocumentKind, document_id: DocumentId
    ) -> Optional[LearningDocument]:
        """Find a document of the given kind by id."""
        stmt = select(learning_documents_table).where(
            learning_documents_table.c.id == document_id,
            learning_documents_table.c.kind == kind.value,
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_document(row._asdict()) if row else None

    @translate_storage_errors("document.find_all")
    async def find_all(self, kind: DocumentKind) -> list[LearningDocument]:
        """Find all documents of one kind, newest first."""
        stmt = (
            select(learning_documents_table)
            .where(learning_documents_table.c.kind == kind.value)
            .order_by(desc(learning_documents_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_document(row._asdict()) for row in result.fetchall()]
