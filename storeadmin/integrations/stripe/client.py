"""Stripe REST API client using httpx."""

import logging
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any
from urllib.parse import urlencode

import httpx

from storeadmin.core.config import settings

logger = logging.getLogger(__name__)


class StripeError(Exception):
    """Stripe rejected a request or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def encode_form(data: Mapping[str, Any], prefix: str = "") -> list[tuple[str, str]]:
    """Flatten nested params into Stripe's bracketed form encoding.

    ``{"line_items": [{"quantity": 1}]}`` becomes
    ``[("line_items[0][quantity]", "1")]``. None values are omitted.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in data.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        pairs.extend(_encode_value(name, value))
    return pairs


def _encode_value(name: str, value: Any) -> list[tuple[str, str]]:
    if value is None:
        return []
    if isinstance(value, Mapping):
        return encode_form(value, name)
    if isinstance(value, list | tuple):
        pairs: list[tuple[str, str]] = []
        for index, item in enumerate(value):
            pairs.extend(_encode_value(f"{name}[{index}]", item))
        return pairs
    if isinstance(value, bool):
        return [(name, "true" if value else "false")]
    return [(name, str(value))]


def to_minor_units(amount: Decimal) -> int:
    """Convert a decimal price to the smallest currency unit (cents)."""
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def build_line_item(name: str, price: Decimal, currency: str | None = None) -> dict[str, Any]:
    """One Checkout line item for a single unit of a product."""
    return {
        "quantity": 1,
        "price_data": {
            "currency": currency or settings.stripe_currency,
            "product_data": {"name": name},
            "unit_amount": to_minor_units(price),
        },
    }


def _error_message(response: httpx.Response) -> str:
    try:
        return str(response.json()["error"]["message"])
    except (ValueError, KeyError, TypeError):
        return f"Stripe returned HTTP {response.status_code}"


class StripeClient:
    """Async client for the parts of the Stripe API used at checkout."""

    def __init__(self, secret_key: str, base_url: str | None = None) -> None:
        self.base_url = (base_url or settings.stripe_api_base).rstrip("/")
        self.headers = {
            "Authorization": f"Bearer {secret_key}",
            "Content-Type": "application/x-www-form-urlencoded",
        }

    async def create_checkout_session(
        self,
        *,
        line_items: list[dict[str, Any]],
        success_url: str,
        cancel_url: str,
        metadata: dict[str, str],
    ) -> dict[str, Any]:
        """Create a hosted Checkout Session and return the session object.

        Raises:
            StripeError: If Stripe rejects the request or is unreachable.
        """
        params: dict[str, Any] = {
            "mode": "payment",
            "line_items": line_items,
            "billing_address_collection": "required",
            "phone_number_collection": {"enabled": True},
            "success_url": success_url,
            "cancel_url": cancel_url,
            "metadata": metadata,
        }

        async with httpx.AsyncClient(headers=self.headers, timeout=30.0) as client:
            try:
                response = await client.post(
                    f"{self.base_url}/checkout/sessions",
                    content=urlencode(encode_form(params)),
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                message = _error_message(e.response)
                logger.warning("Stripe checkout session rejected: %s", message)
                raise StripeError(message, status_code=e.response.status_code) from e
            except httpx.HTTPError as e:
                raise StripeError(f"Stripe unreachable: {e}") from e

        session: dict[str, Any] = response.json()
        return session
