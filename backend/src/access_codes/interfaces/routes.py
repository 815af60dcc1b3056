from fastapi import APIRouter, Depends

from access_codes.application.services import RedeemCodeForDocument
from access_codes.interfaces.schemas import PublicDocumentResponse
from shared.dependencies import get_redeem_code_use_case

router = APIRouter(prefix="/api/public", tags=["public"])


@router.get("/{access_code}", response_model=PublicDocumentResponse)
async def redeem(
    access_code: str,
    use_case: RedeemCodeForDocument = Depends(get_redeem_code_use_case),
):
    document = await use_case.execute(access_code)
    return PublicDocumentResponse(
        title=document.title,
        content=document.content,
        created_at=document.created_at,
    )
