"""Pytest configuration and fixtures for the Store Admin API test suite.

Provides:
- Per-test in-memory SQLite database (aiosqlite) with foreign keys enforced
- Mock authentication (JWT bypass)
- Mock Redis (fakeredis)
- Mock Stripe client
- Disabled rate limiting
- Model factory fixtures for Store, Billboard, Category, Size, Color,
  Product and Order
"""

from collections.abc import AsyncGenerator, Callable
from datetime import datetime
from decimal import Decimal
from typing import Any
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import fakeredis.aioredis
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from storeadmin.core.auth import get_current_user
from storeadmin.core.deps import get_db, get_redis, get_stripe_client
from storeadmin.core.rate_limit import limiter
from storeadmin.integrations.stripe.client import StripeClient
from storeadmin.main import app
from storeadmin.models.base import Base
from storeadmin.models.billboard import Billboard
from storeadmin.models.category import Category
from storeadmin.models.color import Color
from storeadmin.models.order import Order, OrderItem
from storeadmin.models.product import Image, Product
from storeadmin.models.size import Size
from storeadmin.models.store import Store

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
TEST_USER_ID = "user_test_owner"
OTHER_USER_ID = "user_other_owner"
STRIPE_TEST_WEBHOOK_SECRET = "whsec_test_secret"
STRIPE_TEST_SESSION = {
    "id": "cs_test_123",
    "url": "https://checkout.stripe.com/c/pay/cs_test_123",
}

# ---------------------------------------------------------------------------
# Disable rate limiting globally for tests
# ---------------------------------------------------------------------------
limiter.enabled = False

# ---------------------------------------------------------------------------
# Per-test database
# ---------------------------------------------------------------------------


def _enable_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Fresh in-memory database with all tables, shared by every session of one test.

    StaticPool keeps a single connection so the request sessions opened by
    the app and the fixture session see the same data.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Session for test setup (factory fixtures) and assertions."""
    async with session_factory() as session:
        yield session


# ---------------------------------------------------------------------------
# Fake Redis
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_redis() -> fakeredis.aioredis.FakeRedis:
    """Provide a fresh fakeredis instance per test."""
    return fakeredis.aioredis.FakeRedis(decode_responses=True)


# ---------------------------------------------------------------------------
# Auth and Stripe mocks
# ---------------------------------------------------------------------------


@pytest.fixture
def auth_user() -> dict[str, Any]:
    """Return the default authenticated test user payload (mimics decoded JWT)."""
    return {"sub": TEST_USER_ID, "email": "owner@example.com"}


@pytest.fixture
def stripe_client() -> MagicMock:
    """Stripe client whose checkout session call succeeds without network."""
    client = MagicMock(spec=StripeClient)
    client.create_checkout_session = AsyncMock(return_value=dict(STRIPE_TEST_SESSION))
    return client


@pytest.fixture(autouse=True)
def set_stripe_test_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Use a known webhook secret and storefront URL for every test."""
    monkeypatch.setattr(
        "storeadmin.core.config.settings.stripe_webhook_secret", STRIPE_TEST_WEBHOOK_SECRET
    )
    monkeypatch.setattr(
        "storeadmin.core.config.settings.frontend_store_url", "http://store.test"
    )


# ---------------------------------------------------------------------------
# Clients
# ---------------------------------------------------------------------------


def _override_common(
    session_factory: async_sessionmaker[AsyncSession],
    fake_redis: fakeredis.aioredis.FakeRedis,
    stripe_client: MagicMock,
) -> None:
    async def _override_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as s:
            yield s

    async def _override_redis() -> AsyncGenerator[fakeredis.aioredis.FakeRedis, None]:
        yield fake_redis

    app.dependency_overrides[get_db] = _override_session
    app.dependency_overrides[get_redis] = _override_redis
    app.dependency_overrides[get_stripe_client] = lambda: stripe_client


@pytest_asyncio.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
    fake_redis: fakeredis.aioredis.FakeRedis,
    stripe_client: MagicMock,
    auth_user: dict[str, Any],
) -> AsyncGenerator[AsyncClient, None]:
    """Authenticated async test client with all dependencies overridden."""

    async def _override_user() -> dict[str, Any]:
        return auth_user

    _override_common(session_factory, fake_redis, stripe_client)
    app.dependency_overrides[get_current_user] = _override_user

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def unauthed_client(
    session_factory: async_sessionmaker[AsyncSession],
    fake_redis: fakeredis.aioredis.FakeRedis,
    stripe_client: MagicMock,
) -> AsyncGenerator[AsyncClient, None]:
    """Unauthenticated async test client. Auth is NOT overridden."""
    _override_common(session_factory, fake_redis, stripe_client)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def plain_client() -> AsyncGenerator[AsyncClient, None]:
    """Minimal async test client with NO dependency overrides."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# ---------------------------------------------------------------------------
# Model Factories
# ---------------------------------------------------------------------------


@pytest.fixture
def store_factory(db_session: AsyncSession) -> Callable[..., Any]:
    """Factory that creates Store instances in the test database."""

    async def _create(
        *,
        name: str = "Test Store",
        user_id: str = TEST_USER_ID,
        is_active: bool = True,
        created_at: datetime | None = None,
    ) -> Store:
        store = Store(user_id=user_id, name=name, is_active=is_active)
        if created_at is not None:
            store.created_at = created_at
        db_session.add(store)
        await db_session.commit()
        await db_session.refresh(store)
        return store

    return _create


@pytest.fixture
def billboard_factory(db_session: AsyncSession) -> Callable[..., Any]:
    """Factory that creates Billboard instances."""

    async def _create(
        *,
        store_id: UUID,
        label: str = "Summer Sale",
        image_url: str = "https://img.example.com/summer.jpg",
        created_at: datetime | None = None,
    ) -> Billboard:
        billboard = Billboard(store_id=store_id, label=label, image_url=image_url)
        if created_at is not None:
            billboard.created_at = created_at
        db_session.add(billboard)
        await db_session.commit()
        await db_session.refresh(billboard)
        return billboard

    return _create


@pytest.fixture
def category_factory(
    db_session: AsyncSession, billboard_factory: Callable[..., Any]
) -> Callable[..., Any]:
    """Factory that creates Category instances (and a billboard if none is given)."""

    async def _create(
        *,
        store_id: UUID,
        name: str = "Shirts",
        billboard_id: UUID | None = None,
    ) -> Category:
        if billboard_id is None:
            billboard_id = (await billboard_factory(store_id=store_id)).id
        category = Category(store_id=store_id, name=name, billboard_id=billboard_id)
        db_session.add(category)
        await db_session.commit()
        await db_session.refresh(category)
        return category

    return _create


@pytest.fixture
def size_factory(db_session: AsyncSession) -> Callable[..., Any]:
    """Factory that creates Size instances."""

    async def _create(*, store_id: UUID, name: str = "Medium", value: str = "M") -> Size:
        size = Size(store_id=store_id, name=name, value=value)
        db_session.add(size)
        await db_session.commit()
        await db_session.refresh(size)
        return size

    return _create


@pytest.fixture
def color_factory(db_session: AsyncSession) -> Callable[..., Any]:
    """Factory that creates Color instances."""

    async def _create(*, store_id: UUID, name: str = "Red", value: str = "#ff0000") -> Color:
        color = Color(store_id=store_id, name=name, value=value)
        db_session.add(color)
        await db_session.commit()
        await db_session.refresh(color)
        return color

    return _create


@pytest.fixture
def product_factory(
    db_session: AsyncSession,
    category_factory: Callable[..., Any],
    size_factory: Callable[..., Any],
    color_factory: Callable[..., Any],
) -> Callable[..., Any]:
    """Factory that creates Product instances with one image.

    Category, size and color are created in the same store unless given.
    """

    async def _create(
        *,
        store_id: UUID,
        name: str = "Test Product",
        price: Decimal | str = Decimal("10.00"),
        category_id: UUID | None = None,
        size_id: UUID | None = None,
        color_id: UUID | None = None,
        is_featured: bool = False,
        is_archived: bool = False,
        image_urls: list[str] | None = None,
    ) -> Product:
        if category_id is None:
            category_id = (await category_factory(store_id=store_id)).id
        if size_id is None:
            size_id = (await size_factory(store_id=store_id)).id
        if color_id is None:
            color_id = (await color_factory(store_id=store_id)).id

        product = Product(
            store_id=store_id,
            name=name,
            price=Decimal(str(price)),
            category_id=category_id,
            size_id=size_id,
            color_id=color_id,
            is_featured=is_featured,
            is_archived=is_archived,
            images=[
                Image(url=url) for url in (image_urls or ["https://img.example.com/p.jpg"])
            ],
        )
        db_session.add(product)
        await db_session.commit()
        await db_session.refresh(product)
        return product

    return _create


@pytest.fixture
def order_factory(db_session: AsyncSession) -> Callable[..., Any]:
    """Factory that creates Order instances with one item per product id."""

    async def _create(
        *,
        store_id: UUID,
        product_ids: list[UUID] | None = None,
        is_paid: bool = False,
        phone: str = "",
        address: str = "",
        created_at: datetime | None = None,
    ) -> Order:
        order = Order(
            store_id=store_id,
            is_paid=is_paid,
            phone=phone,
            address=address,
            order_items=[OrderItem(product_id=pid) for pid in (product_ids or [])],
        )
        if created_at is not None:
            order.created_at = created_at
        db_session.add(order)
        await db_session.commit()
        await db_session.refresh(order)
        return order

    return _create


# ---------------------------------------------------------------------------
# Convenience fixtures (pre-built models)
# ---------------------------------------------------------------------------


@pytest.fixture
async def store(store_factory: Callable[..., Any]) -> Store:
    """A default store belonging to the test user."""
    return await store_factory()


@pytest.fixture
async def other_store(store_factory: Callable[..., Any]) -> Store:
    """A store belonging to a DIFFERENT user (for multi-tenancy tests)."""
    return await store_factory(name="Other Store", user_id=OTHER_USER_ID)
