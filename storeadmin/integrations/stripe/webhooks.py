"""Stripe webhook signature verification."""

import hashlib
import hmac
import json
import time
from typing import Any

DEFAULT_TOLERANCE = 300  # seconds


class SignatureVerificationError(ValueError):
    """The Stripe-Signature header does not match the payload."""


def compute_signature(payload: bytes, timestamp: int, secret: str) -> str:
    """Hex HMAC-SHA256 of ``"{timestamp}.{payload}"``, as Stripe signs it."""
    signed_payload = f"{timestamp}.".encode() + payload
    return hmac.new(secret.encode("utf-8"), signed_payload, hashlib.sha256).hexdigest()


def _parse_header(sig_header: str) -> tuple[int, list[str]]:
    timestamp: int | None = None
    signatures: list[str] = []
    for part in sig_header.split(","):
        key, _, value = part.strip().partition("=")
        if key == "t":
            try:
                timestamp = int(value)
            except ValueError:
                timestamp = None
        elif key == "v1":
            signatures.append(value)

    if timestamp is None or not signatures:
        raise SignatureVerificationError(
            "Unable to extract timestamp and signatures from header"
        )
    return timestamp, signatures


def verify_header(
    payload: bytes,
    sig_header: str,
    secret: str,
    tolerance: int = DEFAULT_TOLERANCE,
    now: float | None = None,
) -> None:
    """Check a Stripe-Signature header against the raw request body.

    Raises:
        SignatureVerificationError: If no secret is configured, the header is
            malformed, no ``v1`` signature matches, or the timestamp is older
            than ``tolerance``.
    """
    if not secret:
        raise SignatureVerificationError("Webhook secret is not configured")

    timestamp, signatures = _parse_header(sig_header)
    expected = compute_signature(payload, timestamp, secret)

    if not any(hmac.compare_digest(expected, sig) for sig in signatures):
        raise SignatureVerificationError(
            "No signatures found matching the expected signature for payload"
        )

    current = time.time() if now is None else now
    if tolerance and timestamp < current - tolerance:
        raise SignatureVerificationError("Timestamp outside the tolerance zone")


def construct_event(
    payload: bytes,
    sig_header: str,
    secret: str,
    tolerance: int = DEFAULT_TOLERANCE,
) -> dict[str, Any]:
    """Verify the signature and decode the event body."""
    verify_header(payload, sig_header, secret, tolerance)
    try:
        event = json.loads(payload)
    except ValueError as e:
        raise SignatureVerificationError(f"Invalid payload: {e}") from e
    if not isinstance(event, dict):
        raise SignatureVerificationError("Invalid payload: expected a JSON object")
    return event
