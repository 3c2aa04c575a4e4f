"""Pydantic schemas for store CRUD operations."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from storeadmin.schemas.common import BaseSchema


class StoreCreate(BaseSchema):
    """Schema for creating a new store."""

    name: str = Field(..., min_length=1, max_length=255, description="Store name")


class StoreUpdate(BaseSchema):
    """Schema for renaming a store."""

    name: str = Field(..., min_length=1, max_length=255)


class StoreResponse(BaseSchema):
    """Schema for store response."""

    id: UUID
    user_id: str
    name: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
