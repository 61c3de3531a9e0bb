"""Collection request/response schemas."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from app.schemas.common import CamelModel, PartialUpdate


class CollectionCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: str | None = None
    icon: str | None = None
    is_default: bool = False


class CollectionUpdate(PartialUpdate):
    non_nullable: ClassVar[frozenset[str]] = frozenset({"name", "is_default"})

    name: str | None = Field(None, min_length=1)
    description: str | None = None
    icon: str | None = None
    is_default: bool | None = None


class CollectionResponse(CamelModel):
    id: str
    user_id: str
    name: str
    description: str | None
    icon: str | None
    is_default: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CollectionData(CamelModel):
    collection: CollectionResponse


class CollectionEnvelope(CamelModel):
    success: bool = True
    data: CollectionData
