"""Pydantic schemas for colors."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from storeadmin.schemas.common import BaseSchema

# "#rgb" or "#rrggbb"
HEX_COLOR_PATTERN = r"^#(?:[0-9A-Fa-f]{3}){1,2}$"


class ColorCreate(BaseSchema):
    name: str = Field(..., min_length=1, max_length=255)
    value: str = Field(
        ...,
        min_length=1,
        pattern=HEX_COLOR_PATTERN,
        description="Hex color code, e.g. #ff0000",
    )


class ColorUpdate(BaseSchema):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    value: str | None = Field(default=None, pattern=HEX_COLOR_PATTERN)


class ColorResponse(BaseSchema):
    id: UUID
    store_id: UUID
    name: str
    value: str
    created_at: datetime
    updated_at: datetime
