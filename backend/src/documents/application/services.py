import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from access_codes.domain.entities import AccessCode
from access_codes.domain.repository import AccessCodeRepository
from documents.domain.entities import Document
from documents.domain.repository import DocumentRepository
from shared.domain.ports import AccessCodeGenerator, Clock, IdGenerator
from shared.exceptions import ConflictError, ResourceExhaustedError, ValidationError

logger = logging.getLogger(__name__)

MAX_CODE_ATTEMPTS = 10


@dataclass(frozen=True)
class CreatedDocument:
    id: str
    access_code: str


class CreateDocumentAndIssueCode:
    """Persist a document and issue one access code for it.

    The document is saved before a code is allocated. If every attempt at a
    unique code collides, the document stays stored without any code pointing
    at it.
    """

    def __init__(
        self,
        document_repository: DocumentRepository,
        access_code_repository: AccessCodeRepository,
        clock: Clock,
        id_generator: IdGenerator,
        access_code_generator: AccessCodeGenerator,
    ):
        self.document_repository = document_repository
        self.access_code_repository = access_code_repository
        self.clock = clock
        self.id_generator = id_generator
        self.access_code_generator = access_code_generator

    async def execute(
        self, title: str, content: str, expires_in: int | None = None
    ) -> CreatedDocument:
        _validate_input(title, content, expires_in)

        document = Document(
            id=self.id_generator.generate(),
            title=title.strip(),
            content=content.strip(),
            created_at=self.clock.now(),
        )
        expires_at = _expiry_for(document.created_at, expires_in)
        await self.document_repository.save(document)

        access_code = await self._issue_unique_code(document.id, expires_at)

        logger.info(
            "Created document %s with access code %s (expires_at=%s)",
            document.id,
            access_code.code,
            expires_at.isoformat() if expires_at else "never",
        )
        return CreatedDocument(id=document.id, access_code=access_code.code)

    async def _issue_unique_code(
        self, document_id: str, expires_at: datetime | None
    ) -> AccessCode:
        for attempt in range(1, MAX_CODE_ATTEMPTS + 1):
            candidate = self.access_code_generator.generate()
            if await self.access_code_repository.find_by_code(candidate):
                logger.warning("Access code collision on attempt %d: %s", attempt, candidate)
                continue

            access_code = AccessCode(
                code=candidate, document_id=document_id, expires_at=expires_at
            )
            try:
                return await self.access_code_repository.add(access_code)
            except ConflictError:
                # Another writer stored the same code after our lookup
                logger.warning("Access code taken concurrently on attempt %d: %s", attempt, candidate)

        logger.error(
            "Gave up issuing an access code for document %s after %d attempts",
            document_id,
            MAX_CODE_ATTEMPTS,
        )
        raise ResourceExhaustedError(
            "Failed to generate unique access code after maximum attempts"
        )


def _validate_input(title: str, content: str, expires_in: int | None) -> None:
    if not title or not title.strip():
        raise ValidationError("Title cannot be empty")
    if not content or not content.strip():
        raise ValidationError("Content cannot be empty")
    if expires_in is not None:
        if isinstance(expires_in, bool) or not isinstance(expires_in, int):
            raise ValidationError("Expiration time must be an integer number of seconds")
        if expires_in <= 0:
            raise ValidationError("Expiration time must be positive")


def _expiry_for(created_at: datetime, expires_in: int | None) -> datetime | None:
    if expires_in is None:
        return None
    try:
        return created_at + timedelta(seconds=expires_in)
    except OverflowError:
        raise ValidationError("Expiration time is too large")
