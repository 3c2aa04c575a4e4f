"""Tests for category CRUD endpoints.

Covers:
- Public list/read with the billboard embedded
- Create/update validating that the billboard belongs to the same store
- Delete blocked while products are in the category
"""

from collections.abc import Callable
from typing import Any

from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storeadmin.models.category import Category
from storeadmin.models.store import Store


class TestListCategories:
    """Public category listing."""

    async def test_list_embeds_billboard(
        self,
        unauthed_client: AsyncClient,
        store: Store,
        category_factory: Callable[..., Any],
    ) -> None:
        category = await category_factory(store_id=store.id, name="Hats")

        response = await unauthed_client.get(f"/api/v1/stores/{store.id}/categories")
        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 1
        row = data["items"][0]
        assert row["name"] == "Hats"
        assert row["billboard"]["id"] == str(category.billboard_id)
        assert row["billboard"]["label"] == "Summer Sale"

    async def test_get_category(
        self, client: AsyncClient, store: Store, category_factory: Callable[..., Any]
    ) -> None:
        category = await category_factory(store_id=store.id)

        response = await client.get(f"/api/v1/stores/{store.id}/categories/{category.id}")
        assert response.status_code == 200
        assert response.json()["billboard_id"] == str(category.billboard_id)


class TestCreateCategory:
    """Owner-only category creation."""

    async def test_create_category(
        self, client: AsyncClient, store: Store, billboard_factory: Callable[..., Any]
    ) -> None:
        billboard = await billboard_factory(store_id=store.id)

        response = await client.post(
            f"/api/v1/stores/{store.id}/categories",
            json={"name": "Shoes", "billboard_id": str(billboard.id)},
        )
        assert response.status_code == 201

        data = response.json()
        assert data["name"] == "Shoes"
        assert data["billboard"]["id"] == str(billboard.id)

    async def test_missing_billboard_id_returns_400(
        self, client: AsyncClient, store: Store
    ) -> None:
        response = await client.post(
            f"/api/v1/stores/{store.id}/categories", json={"name": "Shoes"}
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Billboard id is required"

    async def test_billboard_from_other_store_returns_400(
        self,
        client: AsyncClient,
        store: Store,
        other_store: Store,
        billboard_factory: Callable[..., Any],
        db_session: AsyncSession,
    ) -> None:
        """A category cannot point at another tenant's billboard."""
        foreign = await billboard_factory(store_id=other_store.id)

        response = await client.post(
            f"/api/v1/stores/{store.id}/categories",
            json={"name": "Shoes", "billboard_id": str(foreign.id)},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Billboard does not belong to this store"

        count = (await db_session.execute(select(func.count()).select_from(Category))).scalar()
        assert count == 0


class TestUpdateCategory:
    """Owner-only partial update."""

    async def test_move_to_another_billboard(
        self,
        client: AsyncClient,
        store: Store,
        category_factory: Callable[..., Any],
        billboard_factory: Callable[..., Any],
    ) -> None:
        category = await category_factory(store_id=store.id)
        new_billboard = await billboard_factory(store_id=store.id, label="Winter")

        response = await client.patch(
            f"/api/v1/stores/{store.id}/categories/{category.id}",
            json={"billboard_id": str(new_billboard.id)},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["name"] == category.name
        assert data["billboard"]["label"] == "Winter"


class TestDeleteCategory:
    """Owner-only delete, refused while products reference the category."""

    async def test_delete_category(
        self, client: AsyncClient, store: Store, category_factory: Callable[..., Any]
    ) -> None:
        category = await category_factory(store_id=store.id)

        response = await client.delete(f"/api/v1/stores/{store.id}/categories/{category.id}")
        assert response.status_code == 204

        response = await client.get(f"/api/v1/stores/{store.id}/categories/{category.id}")
        assert response.status_code == 404

    async def test_delete_category_with_products_returns_409(
        self,
        client: AsyncClient,
        store: Store,
        category_factory: Callable[..., Any],
        product_factory: Callable[..., Any],
    ) -> None:
        category = await category_factory(store_id=store.id)
        await product_factory(store_id=store.id, category_id=category.id)

        response = await client.delete(f"/api/v1/stores/{store.id}/categories/{category.id}")
        assert response.status_code == 409

        response = await client.get(f"/api/v1/stores/{store.id}/categories/{category.id}")
        assert response.status_code == 200
