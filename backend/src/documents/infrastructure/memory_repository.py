from documents.domain.entities import Document


class InMemoryDocumentRepository:
    """Dict-backed repository. Safe within one event loop, not across threads."""

    def __init__(self):
        self._documents: dict[str, Document] = {}

    async def save(self, document: Document) -> Document:
        self._documents[document.id] = document
        return document

    async def find_by_id(self, document_id: str) -> Document | None:
        return self._documents.get(document_id)

    async def find_all(self) -> list[Document]:
        return list(self._documents.values())

    async def clear(self) -> None:
        self._documents.clear()

    def count(self) -> int:
        return len(self._documents)
