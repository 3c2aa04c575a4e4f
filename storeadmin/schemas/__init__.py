"""Pydantic schemas for request/response validation."""

from storeadmin.schemas.common import ErrorResponse, HealthResponse, ListResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "ListResponse",
]
