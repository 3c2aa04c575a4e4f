"""Stripe webhook handler (no auth - verified via signature)."""

import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, HTTPException, Request, status
from redis.exceptions import RedisError

from storeadmin.core.config import settings
from storeadmin.core.deps import DBSession, RedisClient
from storeadmin.integrations.stripe.webhooks import SignatureVerificationError, construct_event
from storeadmin.schemas.common import ErrorResponse
from storeadmin.services.dashboard_service import invalidate_dashboard_cache
from storeadmin.services.order_service import OrderService, format_address

logger = logging.getLogger(__name__)

router = APIRouter()

CHECKOUT_COMPLETED = "checkout.session.completed"


async def _verify_and_parse(request: Request) -> dict[str, Any]:
    """Read the raw body, verify the Stripe-Signature header, decode the event."""
    body = await request.body()
    signature = request.headers.get("Stripe-Signature", "")

    try:
        return construct_event(
            body,
            signature,
            settings.stripe_webhook_secret,
            tolerance=settings.stripe_webhook_tolerance,
        )
    except SignatureVerificationError as e:
        logger.warning("Rejected Stripe webhook: %s", e)
        raise HTTPException(status.HTTP_400_BAD_REQUEST, f"Webhook Error: {e}") from e


def _order_id_from_session(session: dict[str, Any]) -> UUID | None:
    raw = (session.get("metadata") or {}).get("order_id")
    if not raw:
        return None
    try:
        return UUID(str(raw))
    except ValueError:
        return None


@router.post("", responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}})
async def stripe_webhook(
    request: Request,
    db: DBSession,
    redis: RedisClient,
) -> dict[str, str]:
    """Mark the order of a completed checkout session as paid."""
    event = await _verify_and_parse(request)

    if event.get("type") != CHECKOUT_COMPLETED:
        return {"status": "ignored"}

    session: dict[str, Any] = (event.get("data") or {}).get("object") or {}
    order_id = _order_id_from_session(session)
    if order_id is None:
        logger.warning("Checkout session %s has no usable order_id", session.get("id"))
        return {"status": "ignored"}

    customer = session.get("customer_details") or {}
    order = await OrderService(db).mark_paid(
        order_id,
        phone=customer.get("phone") or "",
        address=format_address(customer.get("address")),
    )
    if order is None:
        return {"status": "ignored"}

    try:
        await invalidate_dashboard_cache(redis, order.store_id)
    except RedisError:
        # The order is already paid; a stale overview expires with its TTL
        logger.exception("Dashboard cache drop failed for store %s", order.store_id)
    return {"status": "paid"}
