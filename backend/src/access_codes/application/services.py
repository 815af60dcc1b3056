import logging
from dataclasses import dataclass
from datetime import datetime

from access_codes.domain.repository import AccessCodeRepository
from documents.domain.repository import DocumentRepository
from shared.domain.ports import Clock
from shared.exceptions import ExpiredError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RedeemedDocument:
    title: str
    content: str
    created_at: datetime


class RedeemCodeForDocument:
    def __init__(
        self,
        access_code_repository: AccessCodeRepository,
        document_repository: DocumentRepository,
        clock: Clock,
    ):
        self.access_code_repository = access_code_repository
        self.document_repository = document_repository
        self.clock = clock

    async def execute(self, code: str) -> RedeemedDocument:
        if not code or not code.strip():
            raise ValidationError("Access code is required")

        access_code = await self.access_code_repository.find_by_code(code.strip())
        if not access_code:
            logger.warning("Redemption of unknown access code %s", code.strip())
            raise NotFoundError("Access code")

        if access_code.is_expired(self.clock.now()):
            logger.warning("Redemption of expired access code %s", access_code.code)
            raise ExpiredError("Access code has expired")

        document = await self.document_repository.find_by_id(access_code.document_id)
        if not document:
            logger.warning(
                "Access code %s points at missing document %s",
                access_code.code,
                access_code.document_id,
            )
            raise NotFoundError("Document")

        logger.info("Redeemed access code %s for document %s", access_code.code, document.id)
        return RedeemedDocument(
            title=document.title,
            content=document.content,
            created_at=document.created_at,
        )
