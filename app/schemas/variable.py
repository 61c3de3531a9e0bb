"""Prompt variable request/response schemas."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from app.schemas.common import CamelModel, PartialUpdate


class VariableCreate(CamelModel):
    name: str = Field(..., min_length=1)
    label: str | None = None
    description: str | None = None
    input_type: str | None = None  # text | select | multiline
    default_value: str | None = None
    options_json: str | None = None
    order_index: int | None = None


class VariableUpdate(PartialUpdate):
    non_nullable: ClassVar[frozenset[str]] = frozenset({"name"})

    name: str | None = Field(None, min_length=1)
    label: str | None = None
    description: str | None = None
    input_type: str | None = None
    default_value: str | None = None
    options_json: str | None = None
    order_index: int | None = None


class VariableResponse(CamelModel):
    id: str
    template_id: str
    name: str
    label: str | None
    description: str | None
    input_type: str | None
    default_value: str | None
    options_json: str | None
    order_index: int | None
    created_at: datetime

    model_config = {"from_attributes": True}


class VariableData(CamelModel):
    variable: VariableResponse


class VariableEnvelope(CamelModel):
    success: bool = True
    data: VariableData
