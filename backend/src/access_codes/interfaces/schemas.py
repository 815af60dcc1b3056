from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PublicDocumentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    content: str
    created_at: datetime = Field(alias="createdAt")
