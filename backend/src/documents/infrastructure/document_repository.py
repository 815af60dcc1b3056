from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from documents.domain.entities import Document
from documents.infrastructure.models import DocumentModel


class DbDocumentRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, document: Document) -> Document:
        await self.session.merge(
            DocumentModel(
                id=document.id,
                title=document.title,
                content=document.content,
                created_at=document.created_at,
            )
        )
        await self.session.commit()
        return document

    async def find_by_id(self, document_id: str) -> Document | None:
        result = await self.session.execute(
            select(DocumentModel).where(DocumentModel.id == document_id)
        )
        model = result.scalar_one_or_none()
        return _to_entity(model) if model else None

    async def find_all(self) -> list[Document]:
        result = await self.session.execute(
            select(DocumentModel).order_by(DocumentModel.created_at.asc())
        )
        return [_to_entity(m) for m in result.scalars().all()]

    async def clear(self) -> None:
        await self.session.execute(delete(DocumentModel))
        await self.session.commit()


def _to_entity(model: DocumentModel) -> Document:
    return Document(
        id=model.id,
        title=model.title,
        content=model.content,
        created_at=model.created_at,
    )
