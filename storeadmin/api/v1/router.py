"""API v1 router combining all route modules."""

from fastapi import APIRouter

from storeadmin.api.v1 import (
    billboards,
    categories,
    checkout,
    colors,
    dashboard,
    health,
    orders,
    products,
    sizes,
    stores,
)
from storeadmin.api.v1.webhooks import stripe as stripe_webhooks

api_router = APIRouter()

# Include health check routes (no prefix)
api_router.include_router(health.router)

# Store CRUD (requires auth)
api_router.include_router(
    stores.router,
    prefix="/stores",
    tags=["stores"],
)

# Catalog: reads are public for the storefront, writes require the store owner
api_router.include_router(
    billboards.router,
    prefix="/stores/{store_id}/billboards",
    tags=["billboards"],
)
api_router.include_router(
    categories.router,
    prefix="/stores/{store_id}/categories",
    tags=["categories"],
)
api_router.include_router(
    sizes.router,
    prefix="/stores/{store_id}/sizes",
    tags=["sizes"],
)
api_router.include_router(
    colors.router,
    prefix="/stores/{store_id}/colors",
    tags=["colors"],
)
api_router.include_router(
    products.router,
    prefix="/stores/{store_id}/products",
    tags=["products"],
)

# Orders and dashboard (store owner only)
api_router.include_router(
    orders.router,
    prefix="/stores/{store_id}/orders",
    tags=["orders"],
)
api_router.include_router(
    dashboard.router,
    prefix="/stores/{store_id}/dashboard",
    tags=["dashboard"],
)

# Storefront checkout (public, rate limited)
api_router.include_router(
    checkout.router,
    prefix="/stores/{store_id}/checkout",
    tags=["checkout"],
)

# Stripe webhooks (no auth - verified via signature)
api_router.include_router(
    stripe_webhooks.router,
    prefix="/webhooks/stripe",
    tags=["webhooks"],
)
