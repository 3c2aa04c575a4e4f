"""Tests for GET /api/v1/stores/{store_id}/orders and the address formatter."""

from collections.abc import Callable
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from httpx import AsyncClient

from storeadmin.models.store import Store
from storeadmin.services.order_service import format_address


class TestListOrders:
    """Orders table rows."""

    async def test_rows_join_product_names_and_sum_prices(
        self,
        client: AsyncClient,
        store: Store,
        product_factory: Callable[..., Any],
        order_factory: Callable[..., Any],
    ) -> None:
        shirt = await product_factory(store_id=store.id, name="Shirt", price="20.00")
        hat = await product_factory(store_id=store.id, name="Hat", price="5.50")
        order = await order_factory(
            store_id=store.id,
            product_ids=[shirt.id, hat.id],
            is_paid=True,
            phone="+15550100",
            address="1 Main St, Springfield",
        )

        response = await client.get(f"/api/v1/stores/{store.id}/orders")
        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 1
        row = data["items"][0]
        assert row["id"] == str(order.id)
        assert sorted(row["products"].split(", ")) == ["Hat", "Shirt"]
        assert Decimal(str(row["total_price"])) == Decimal("25.50")
        assert row["is_paid"] is True
        assert row["phone"] == "+15550100"
        assert row["address"] == "1 Main St, Springfield"

    async def test_rows_newest_first(
        self,
        client: AsyncClient,
        store: Store,
        product_factory: Callable[..., Any],
        order_factory: Callable[..., Any],
    ) -> None:
        product = await product_factory(store_id=store.id)
        old = await order_factory(
            store_id=store.id,
            product_ids=[product.id],
            created_at=datetime(2024, 1, 1, tzinfo=UTC),
        )
        new = await order_factory(
            store_id=store.id,
            product_ids=[product.id],
            created_at=datetime(2024, 3, 1, tzinfo=UTC),
        )

        response = await client.get(f"/api/v1/stores/{store.id}/orders")
        assert [r["id"] for r in response.json()["items"]] == [str(new.id), str(old.id)]

    async def test_orders_require_auth(self, unauthed_client: AsyncClient, store: Store) -> None:
        response = await unauthed_client.get(f"/api/v1/stores/{store.id}/orders")
        assert response.status_code == 401


class TestFormatAddress:
    """Unit tests for joining a Stripe address into one line."""

    def test_full_address(self) -> None:
        address = {
            "line1": "1 Main St",
            "line2": "Apt 4",
            "postal_code": "12345",
            "city": "Springfield",
            "state": "IL",
            "country": "US",
        }
        assert format_address(address) == "1 Main St, Apt 4, 12345, Springfield, IL, US"

    def test_empty_parts_dropped(self) -> None:
        address = {"line1": "1 Main St", "line2": None, "city": "Springfield", "country": ""}
        assert format_address(address) == "1 Main St, Springfield"

    def test_missing_address(self) -> None:
        assert format_address(None) == ""
