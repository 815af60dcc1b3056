from fastapi import APIRouter, Depends

from documents.application.services import CreateDocumentAndIssueCode
from documents.interfaces.schemas import CreateDocumentRequest, CreateDocumentResponse
from shared.dependencies import get_create_document_use_case

router = APIRouter(prefix="/api/v1/documents", tags=["documents"])


@router.post("", response_model=CreateDocumentResponse, status_code=201)
async def create(
    body: CreateDocumentRequest,
    use_case: CreateDocumentAndIssueCode = Depends(get_create_document_use_case),
):
    created = await use_case.execute(
        title=body.title,
        content=body.content,
        expires_in=body.expires_in,
    )
    return CreateDocumentResponse(id=created.id, access_code=created.access_code)
