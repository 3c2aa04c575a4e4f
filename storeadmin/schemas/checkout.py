"""Pydantic schemas for storefront checkout."""

from uuid import UUID

from storeadmin.schemas.common import BaseSchema


class CheckoutRequest(BaseSchema):
    # Emptiness is checked by the route so it can answer with the storefront's message
    product_ids: list[UUID] | None = None


class CheckoutResponse(BaseSchema):
    url: str
