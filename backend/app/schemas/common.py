"""
Shared schema pieces: camelCase base model, pagination envelope, message response
"""
from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase JSON. Accepts either spelling on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Pagination(CamelModel):
    page: int
    page_size: int
    total_count: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


class Page(CamelModel, Generic[T]):
    """Standard list response: one page of items plus the pagination envelope"""

    items: List[T]
    pagination: Pagination


def patch_fields(payload: BaseModel, nullable: tuple[str, ...] = ()) -> dict:
    """Fields explicitly sent in a PATCH body. Nulls are dropped unless the column allows them."""
    return {
        key: value
        for key, value in payload.model_dump(exclude_unset=True).items()
        if value is not None or key in nullable
    }


class MessageResponse(BaseModel):
    message: str
