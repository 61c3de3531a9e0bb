"""Shared schema building blocks: camelCase wire names, envelopes, partial updates."""

from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, protected_namespaces=()
    )


class PartialUpdate(CamelModel):
    """Body of a PATCH request.

    Presence is tracked through ``model_fields_set``: a field that was never
    sent is left untouched, while an explicit ``null`` clears a nullable
    column. At least one field must be sent, and the columns listed in
    ``non_nullable`` cannot be cleared.
    """

    non_nullable: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def check_provided_fields(self):
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided to update.")
        cleared = sorted(
            name for name in self.model_fields_set & self.non_nullable if getattr(self, name) is None
        )
        if cleared:
            raise ValueError(f"Field(s) cannot be null: {', '.join(cleared)}")
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ListData(CamelModel, Generic[T]):
    items: list[T]
    total: int


class ListResponse(CamelModel, Generic[T]):
    success: bool = True
    data: ListData[T]


class SuccessResponse(CamelModel):
    success: bool = True
