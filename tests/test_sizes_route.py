"""Tests for size CRUD endpoints."""

from collections.abc import Callable
from typing import Any

from httpx import AsyncClient

from storeadmin.models.store import Store


class TestSizes:
    """Size CRUD under a store."""

    async def test_create_and_list(self, client: AsyncClient, store: Store) -> None:
        response = await client.post(
            f"/api/v1/stores/{store.id}/sizes", json={"name": "Large", "value": "L"}
        )
        assert response.status_code == 201
        assert response.json()["value"] == "L"

        response = await client.get(f"/api/v1/stores/{store.id}/sizes")
        data = response.json()
        assert data["total"] == 1
        assert data["items"][0]["name"] == "Large"

    async def test_missing_value_returns_400(self, client: AsyncClient, store: Store) -> None:
        response = await client.post(f"/api/v1/stores/{store.id}/sizes", json={"name": "Large"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Value is required"

    async def test_update_size(
        self, client: AsyncClient, store: Store, size_factory: Callable[..., Any]
    ) -> None:
        size = await size_factory(store_id=store.id)

        response = await client.patch(
            f"/api/v1/stores/{store.id}/sizes/{size.id}", json={"value": "Md"}
        )
        assert response.status_code == 200

        data = response.json()
        assert data["value"] == "Md"
        assert data["name"] == "Medium"

    async def test_delete_unused_size(
        self, client: AsyncClient, store: Store, size_factory: Callable[..., Any]
    ) -> None:
        size = await size_factory(store_id=store.id)

        response = await client.delete(f"/api/v1/stores/{store.id}/sizes/{size.id}")
        assert response.status_code == 204

    async def test_delete_size_in_use_returns_409(
        self,
        client: AsyncClient,
        store: Store,
        size_factory: Callable[..., Any],
        product_factory: Callable[..., Any],
    ) -> None:
        size = await size_factory(store_id=store.id)
        await product_factory(store_id=store.id, size_id=size.id)

        response = await client.delete(f"/api/v1/stores/{store.id}/sizes/{size.id}")
        assert response.status_code == 409

        response = await client.get(f"/api/v1/stores/{store.id}/sizes/{size.id}")
        assert response.status_code == 200
