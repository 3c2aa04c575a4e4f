"""Bearer JWT authentication against the identity provider's JWKS."""

import asyncio
from typing import Annotated, Any

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jwt import PyJWKClient, PyJWKClientError

from storeadmin.core.config import settings

bearer_scheme = HTTPBearer(auto_error=False)

_jwks_client: PyJWKClient | None = None
_jwks_lock = asyncio.Lock()


def get_jwks_client() -> PyJWKClient:
    """Get or create the JWKS client."""
    global _jwks_client  # noqa: PLW0603
    if _jwks_client is None:
        _jwks_client = PyJWKClient(settings.auth_jwks_url, cache_keys=True)
    return _jwks_client


async def verify_token(token: str) -> dict[str, Any]:
    """Verify a session JWT and return its claims.

    Issuer and audience are only checked when configured, since some identity
    providers omit ``aud`` from session tokens.

    Raises:
        HTTPException: 401 if the token is invalid or expired, 503 if the
            signing keys cannot be fetched.
    """
    try:
        signing_key = get_jwks_client().get_signing_key_from_jwt(token)

        payload: dict[str, Any] = jwt.decode(
            token,
            signing_key.key,
            algorithms=["RS256"],
            audience=settings.auth_audience,
            issuer=settings.auth_issuer,
            options={
                "verify_exp": True,
                "verify_iat": True,
                "verify_aud": settings.auth_audience is not None,
                "verify_iss": settings.auth_issuer is not None,
                "require": ["sub", "exp"],
            },
        )
        return payload
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except jwt.InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except PyJWKClientError as e:
        # Drop the cached client so the next request refetches the key set
        async with _jwks_lock:
            global _jwks_client  # noqa: PLW0603
            _jwks_client = None
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Authentication service unavailable: {str(e)}",
        )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> dict[str, Any]:
    """Return the verified claims of the caller.

    Raises:
        HTTPException: 401 when no bearer token is present.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return await verify_token(credentials.credentials)


def get_user_id(user: dict[str, Any]) -> str:
    """Extract the owning user id (``sub`` claim) from verified claims."""
    user_id = user.get("sub")
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return str(user_id)


CurrentUser = Annotated[dict[str, Any], Depends(get_current_user)]
