"""Storefront checkout endpoint (public, called from the shopper's browser)."""

from uuid import UUID

from fastapi import APIRouter, HTTPException, Request, status

from storeadmin.core.config import settings
from storeadmin.core.deps import DBSession, Stripe, get_active_store
from storeadmin.core.rate_limit import limiter
from storeadmin.integrations.stripe.client import StripeError
from storeadmin.schemas.checkout import CheckoutRequest, CheckoutResponse
from storeadmin.schemas.common import ErrorResponse
from storeadmin.services.checkout_service import CheckoutService, ProductsUnavailableError

router = APIRouter()


@router.post(
    "",
    response_model=CheckoutResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse},
    },
    summary="Start checkout",
    description="""
    Create an unpaid order for the cart and return the hosted payment page URL.

    The order is marked paid later by the Stripe webhook.
    """,
)
@limiter.limit(settings.checkout_rate_limit)
async def create_checkout(
    request: Request,  # noqa: ARG001  (required by slowapi)
    store_id: UUID,
    data: CheckoutRequest,
    db: DBSession,
    stripe: Stripe,
) -> CheckoutResponse:
    if not data.product_ids:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Product IDs are required",
        )

    await get_active_store(store_id, db)

    service = CheckoutService(db, stripe)
    try:
        url = await service.create_checkout(store_id, data.product_ids)
    except ProductsUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Some products are no longer available",
        ) from e
    except StripeError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Payment provider unavailable",
        ) from e

    return CheckoutResponse(url=url)
