from typing import Protocol

from documents.domain.entities import Document


class DocumentRepository(Protocol):
    async def save(self, document: Document) -> Document: ...

    async def find_by_id(self, document_id: str) -> Document | None: ...

    async def find_all(self) -> list[Document]: ...
