"""Pydantic schemas for sizes."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from storeadmin.schemas.common import BaseSchema


class SizeCreate(BaseSchema):
    name: str = Field(..., min_length=1, max_length=255)
    value: str = Field(..., min_length=1, max_length=255)


class SizeUpdate(BaseSchema):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    value: str | None = Field(default=None, min_length=1, max_length=255)


class SizeResponse(BaseSchema):
    id: UUID
    store_id: UUID
    name: str
    value: str
    created_at: datetime
    updated_at: datetime
