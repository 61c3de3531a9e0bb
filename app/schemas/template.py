"""Template request/response schemas."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from app.schemas.common import CamelModel, PartialUpdate


class TemplateCreate(CamelModel):
    collection_id: str | None = Field(None, min_length=1)
    name: str = Field(..., min_length=1)
    description: str | None = None
    model_hint: str | None = None  # chat | image | code
    prompt_body: str = Field(..., min_length=1)  # text with {{variables}}
    tags: str | None = None
    is_favorite: bool = False


class TemplateUpdate(PartialUpdate):
    """Explicit ``collectionId: null`` detaches the template from its collection."""

    non_nullable: ClassVar[frozenset[str]] = frozenset({"name", "prompt_body", "is_favorite"})

    collection_id: str | None = Field(None, min_length=1)
    name: str | None = Field(None, min_length=1)
    description: str | None = None
    model_hint: str | None = None
    prompt_body: str | None = Field(None, min_length=1)
    tags: str | None = None
    is_favorite: bool | None = None


class TemplateResponse(CamelModel):
    id: str
    collection_id: str | None
    user_id: str
    name: str
    description: str | None
    model_hint: str | None
    prompt_body: str
    tags: str | None
    is_favorite: bool
    is_system: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TemplateData(CamelModel):
    template: TemplateResponse


class TemplateEnvelope(CamelModel):
    success: bool = True
    data: TemplateData
