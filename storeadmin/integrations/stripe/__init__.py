"""Stripe Checkout integration."""

from storeadmin.integrations.stripe.client import StripeClient, StripeError
from storeadmin.integrations.stripe.webhooks import SignatureVerificationError, construct_event

__all__ = [
    "SignatureVerificationError",
    "StripeClient",
    "StripeError",
    "construct_event",
]
