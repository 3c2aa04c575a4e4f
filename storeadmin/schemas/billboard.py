"""Pydantic schemas for billboards."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from storeadmin.schemas.common import BaseSchema


class BillboardCreate(BaseSchema):
    label: str = Field(..., min_length=1, max_length=255)
    image_url: str = Field(..., min_length=1, description="Hosted image URL")


class BillboardUpdate(BaseSchema):
    label: str | None = Field(default=None, min_length=1, max_length=255)
    image_url: str | None = Field(default=None, min_length=1)


class BillboardResponse(BaseSchema):
    id: UUID
    store_id: UUID
    label: str
    image_url: str
    created_at: datetime
    updated_at: datetime
