"""Pydantic schemas for categories."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from storeadmin.schemas.billboard import BillboardResponse
from storeadmin.schemas.common import BaseSchema


class CategoryCreate(BaseSchema):
    name: str = Field(..., min_length=1, max_length=255)
    billboard_id: UUID


class CategoryUpdate(BaseSchema):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    billboard_id: UUID | None = None


class CategoryResponse(BaseSchema):
    """Category with the billboard shown above it on the storefront."""

    id: UUID
    store_id: UUID
    billboard_id: UUID
    name: str
    billboard: BillboardResponse
    created_at: datetime
    updated_at: datetime


class CategorySummary(BaseSchema):
    """Category as embedded in product rows."""

    id: UUID
    name: str
    billboard_id: UUID
