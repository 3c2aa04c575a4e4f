"""Pydantic schemas for the orders table."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from storeadmin.schemas.common import BaseSchema


class OrderRow(BaseSchema):
    """One row of the dashboard orders table."""

    id: UUID
    phone: str
    address: str
    is_paid: bool
    products: str
    total_price: Decimal
    created_at: datetime
