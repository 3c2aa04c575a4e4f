"""Pydantic schemas for the dashboard overview."""

from decimal import Decimal

from storeadmin.schemas.common import BaseSchema


class GraphPoint(BaseSchema):
    """Revenue for one calendar month, e.g. ``{"name": "Jan", "total": 1000}``."""

    name: str
    total: Decimal


class DashboardOverview(BaseSchema):
    total_revenue: Decimal
    sales_count: int
    stock_count: int
    revenue_by_month: list[GraphPoint]
