import logging

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from access_codes.domain.entities import AccessCode
from access_codes.infrastructure.models import AccessCodeModel
from shared.exceptions import ConflictError

logger = logging.getLogger(__name__)

_EXPIRY_ORDER = (
    AccessCodeModel.expires_at.asc().nulls_first(),
    AccessCodeModel.code.asc(),
)


class DbAccessCodeRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, access_code: AccessCode) -> AccessCode:
        await self.session.merge(_to_model(access_code))
        await self.session.commit()
        return access_code

    async def add(self, access_code: AccessCode) -> AccessCode:
        try:
            await self.session.execute(
                insert(AccessCodeModel).values(
                    code=access_code.code,
                    document_id=access_code.document_id,
                    expires_at=access_code.expires_at,
                )
            )
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            logger.debug("Insert rejected, code already stored: %s", access_code.code)
            raise ConflictError(f"Access code already exists: {access_code.code}")
        return access_code

    async def find_by_code(self, code: str) -> AccessCode | None:
        result = await self.session.execute(
            select(AccessCodeModel).where(AccessCodeModel.code == code)
        )
        model = result.scalar_one_or_none()
        return _to_entity(model) if model else None

    async def find_by_document_id(self, document_id: str) -> list[AccessCode]:
        result = await self.session.execute(
            select(AccessCodeModel)
            .where(AccessCodeModel.document_id == document_id)
            .order_by(*_EXPIRY_ORDER)
        )
        return [_to_entity(m) for m in result.scalars().all()]

    async def find_all(self) -> list[AccessCode]:
        result = await self.session.execute(
            select(AccessCodeModel).order_by(*_EXPIRY_ORDER)
        )
        return [_to_entity(m) for m in result.scalars().all()]

    async def delete(self, code: str) -> None:
        await self.session.execute(
            delete(AccessCodeModel).where(AccessCodeModel.code == code)
        )
        await self.session.commit()

    async def clear(self) -> None:
        await self.session.execute(delete(AccessCodeModel))
        await self.session.commit()


def _to_model(access_code: AccessCode) -> AccessCodeModel:
    return AccessCodeModel(
        code=access_code.code,
        document_id=access_code.document_id,
        expires_at=access_code.expires_at,
    )


def _to_entity(model: AccessCodeModel) -> AccessCode:
    return AccessCode(
        code=model.code,
        document_id=model.document_id,
        expires_at=model.expires_at,
    )
