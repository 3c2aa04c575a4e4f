"""Signing helper for simulating Stripe webhooks locally.

Reads a JSON event body from stdin and prints a ``Stripe-Signature`` header
value (``t=<unix time>,v1=<hex HMAC-SHA256>``) signed with
STRIPE_WEBHOOK_SECRET from the environment (or .env file).

Usage:
    BODY='{"type":"checkout.session.completed","data":{"object":{"metadata":{"order_id":"..."}}}}'
    SIG=$(echo -n "$BODY" | python -m scripts.sign_webhook)
    curl -X POST http://localhost:8000/api/v1/webhooks/stripe \\
      -H "Content-Type: application/json" \\
      -H "Stripe-Signature: $SIG" \\
      -d "$BODY"
"""

import sys
import time

from storeadmin.core.config import settings
from storeadmin.integrations.stripe.webhooks import compute_signature


def sign(body: bytes, secret: str, timestamp: int | None = None) -> str:
    """Build the Stripe-Signature header value for ``body``."""
    ts = int(time.time()) if timestamp is None else timestamp
    return f"t={ts},v1={compute_signature(body, ts, secret)}"


def main() -> None:
    secret = settings.stripe_webhook_secret
    if not secret:
        print("ERROR: STRIPE_WEBHOOK_SECRET is not set in .env", file=sys.stderr)
        sys.exit(1)

    body = sys.stdin.buffer.read()
    if not body:
        print("ERROR: No input received on stdin", file=sys.stderr)
        sys.exit(1)

    print(sign(body, secret), end="")


if __name__ == "__main__":
    main()
