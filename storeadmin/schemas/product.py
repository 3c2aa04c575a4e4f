"""Pydantic schemas for products and their images."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import Field

from storeadmin.schemas.category import CategorySummary
from storeadmin.schemas.color import ColorResponse
from storeadmin.schemas.common import BaseSchema
from storeadmin.schemas.size import SizeResponse


class ImageIn(BaseSchema):
    url: str = Field(..., min_length=1)


class ImageResponse(BaseSchema):
    id: UUID
    url: str


class ProductCreate(BaseSchema):
    """Schema for creating a product."""

    name: str = Field(..., min_length=1, max_length=255)
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    category_id: UUID
    size_id: UUID
    color_id: UUID
    images: list[ImageIn] = Field(..., min_length=1)
    is_featured: bool = False
    is_archived: bool = False


class ProductUpdate(BaseSchema):
    """Partial product update. ``images``, when given, replaces the image set."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    price: Decimal | None = Field(default=None, gt=0, max_digits=10, decimal_places=2)
    category_id: UUID | None = None
    size_id: UUID | None = None
    color_id: UUID | None = None
    images: list[ImageIn] | None = Field(default=None, min_length=1)
    is_featured: bool | None = None
    is_archived: bool | None = None


class ProductResponse(BaseSchema):
    """Product with its images and option rows embedded."""

    id: UUID
    store_id: UUID
    name: str
    price: Decimal
    is_featured: bool
    is_archived: bool
    category_id: UUID
    size_id: UUID
    color_id: UUID
    images: list[ImageResponse]
    category: CategorySummary
    size: SizeResponse
    color: ColorResponse
    created_at: datetime
    updated_at: datetime
