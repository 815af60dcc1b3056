from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from access_codes.infrastructure.access_code_repository import DbAccessCodeRepository
from access_codes.infrastructure.memory_repository import InMemoryAccessCodeRepository
from documents.infrastructure.document_repository import DbDocumentRepository
from documents.infrastructure.memory_repository import InMemoryDocumentRepository

REPOSITORY_BACKENDS = ("memory", "sql")


@dataclass
class Repositories:
    document_repository: InMemoryDocumentRepository | DbDocumentRepository
    access_code_repository: InMemoryAccessCodeRepository | DbAccessCodeRepository

    async def cleanup(self) -> None:
        """Remove every stored record, codes first."""
        await self.access_code_repository.clear()
        await self.document_repository.clear()


def create_repositories(backend: str, session: AsyncSession | None = None) -> Repositories:
    """Build a matched pair of repositories for the named backend."""
    if backend == "memory":
        return Repositories(
            document_repository=InMemoryDocumentRepository(),
            access_code_repository=InMemoryAccessCodeRepository(),
        )
    if backend == "sql":
        if session is None:
            raise ValueError("The sql backend requires a database session")
        return Repositories(
            document_repository=DbDocumentRepository(session),
            access_code_repository=DbAccessCodeRepository(session),
        )
    raise ValueError(f"Unsupported repository backend: {backend}")
