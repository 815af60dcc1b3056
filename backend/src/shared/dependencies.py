from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from access_codes.application.services import RedeemCodeForDocument
from documents.application.services import CreateDocumentAndIssueCode
from shared.config import settings
from shared.domain.ports import AccessCodeGenerator, Clock, IdGenerator
from shared.infrastructure.database import async_session
from shared.infrastructure.repository_factory import Repositories, create_repositories
from shared.infrastructure.services import (
    RandomAccessCodeGenerator,
    SystemClock,
    UuidIdGenerator,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session() as session:
        yield session


@lru_cache
def get_memory_repositories() -> Repositories:
    # One store per process so records survive across requests
    return create_repositories("memory")


def get_repositories(db: AsyncSession = Depends(get_db)) -> Repositories:
    if settings.REPOSITORY_BACKEND == "memory":
        return get_memory_repositories()
    return create_repositories("sql", db)


def get_clock() -> Clock:
    return SystemClock()


def get_id_generator() -> IdGenerator:
    return UuidIdGenerator()


def get_access_code_generator() -> AccessCodeGenerator:
    return RandomAccessCodeGenerator(length=settings.ACCESS_CODE_LENGTH)


def get_create_document_use_case(
    repos: Repositories = Depends(get_repositories),
    clock: Clock = Depends(get_clock),
    id_generator: IdGenerator = Depends(get_id_generator),
    access_code_generator: AccessCodeGenerator = Depends(get_access_code_generator),
) -> CreateDocumentAndIssueCode:
    return CreateDocumentAndIssueCode(
        document_repository=repos.document_repository,
        access_code_repository=repos.access_code_repository,
        clock=clock,
        id_generator=id_generator,
        access_code_generator=access_code_generator,
    )


def get_redeem_code_use_case(
    repos: Repositories = Depends(get_repositories),
    clock: Clock = Depends(get_clock),
) -> RedeemCodeForDocument:
    return RedeemCodeForDocument(
        access_code_repository=repos.access_code_repository,
        document_repository=repos.document_repository,
        clock=clock,
    )
