from pydantic import BaseModel, ConfigDict, Field


class CreateDocumentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    content: str
    expires_in: int | None = Field(default=None, alias="expiresIn")


class CreateDocumentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    access_code: str = Field(alias="accessCode")
