"""Common Pydantic schemas used across the API."""

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class HealthResponse(BaseSchema):
    """Health check response schema."""

    status: str
    version: str
    environment: str
    checks: dict[str, str]


class ErrorResponse(BaseSchema):
    """Error response schema."""

    detail: str
    errors: list[dict[str, object]] | None = None


class ListResponse[T](BaseSchema):
    """List wrapper for collection endpoints."""

    items: list[T]
    total: int
