"""
Shared response shapes.
"""

from typing import Generic, List, TypeVar
from pydantic import BaseModel, Field

T = TypeVar("T")


class MetaInfo(BaseModel):
    """Pagination metadata returned alongside a listing page."""
    page: int
    limit: int
    total: int
    pages: int
    sort_by: str = Field(..., alias="sortBy")
    order: str
    search: str

    class Config:
        populate_by_name = True


class ListingEnvelope(BaseModel, Generic[T]):
    """A page of records plus its pagination metadata."""
    data: List[T]
    meta: MetaInfo


class MessageResponse(BaseModel):
    message: str
