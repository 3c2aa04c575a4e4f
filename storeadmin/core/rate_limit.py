"""Per-client rate limiting for the public storefront endpoints."""

from slowapi import Limiter
from starlette.requests import Request


def client_ip(request: Request) -> str:
    """Best-effort client address when running behind a reverse proxy.

    The storefront calls checkout from the shopper's browser, so the first
    X-Forwarded-For hop is the shopper, not the storefront server.
    """
    forwarded = request.headers.get("X-Forwarded-For", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip
    return request.client.host if request.client else "127.0.0.1"


limiter = Limiter(key_func=client_ip)
