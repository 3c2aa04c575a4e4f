"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.exc import IntegrityError

from storeadmin.api.v1.router import api_router
from storeadmin.core.config import settings
from storeadmin.core.database import dispose_engine
from storeadmin.core.logging_config import (
    generate_request_id,
    request_id_var,
    setup_logging,
)
from storeadmin.core.rate_limit import limiter

logger = logging.getLogger(__name__)

# Pydantic error types that mean "the client left this out"
_MISSING_ERROR_TYPES = {"missing", "string_too_short", "too_short"}


def describe_validation_error(errors: list[Any]) -> str:
    """Turn the first pydantic error into a short message such as ``Label is required``."""
    if not errors:
        return "Invalid request"

    first = errors[0]
    loc = [part for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    field = str(loc[-1]) if loc and not isinstance(loc[-1], int) else None
    if field is None and len(loc) > 1:
        field = str(loc[-2])

    if field is None:
        return str(first.get("msg", "Invalid request"))

    label = field.replace("_", " ").capitalize()
    if first.get("type") in _MISSING_ERROR_TYPES:
        return f"{label} is required"
    return f"{label}: {first.get('msg', 'is invalid')}"


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    setup_logging(debug=settings.debug)
    logger.info("Starting %s v%s", settings.project_name, settings.version)
    logger.info("Environment: %s", settings.environment)
    yield
    logger.info("Shutting down...")
    await dispose_engine()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    # Sentry init (before middleware)
    if settings.sentry_dsn:
        import sentry_sdk

        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
        )

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
        lifespan=lifespan,
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]
    app.add_middleware(SlowAPIMiddleware)

    # CORS: admin dashboard and storefront origins (the storefront calls checkout)
    origins = list(dict.fromkeys([*settings.cors_origins, settings.frontend_store_url]))
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    )

    # Request ID middleware
    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next: Any) -> Response:
        rid = request.headers.get("X-Request-ID") or generate_request_id()
        request_id_var.set(rid)
        response: Response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response

    # Include API routes
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report malformed input as 400 with a readable first error."""
        errors = list(exc.errors())
        return JSONResponse(
            status_code=400,
            content={
                "detail": describe_validation_error(errors),
                "errors": [
                    {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")}
                    for e in errors
                ],
            },
        )

    @app.exception_handler(IntegrityError)
    async def integrity_exception_handler(_request: Request, exc: IntegrityError) -> JSONResponse:
        """A foreign key or unique constraint rejected the write."""
        logger.warning("Integrity error: %s", exc.orig)
        return JSONResponse(
            status_code=409,
            content={"detail": "Record is referenced by other records"},
        )

    # Global exception handler to ensure CORS headers are present on 500 errors
    @app.exception_handler(Exception)
    async def global_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
        """Handle unhandled exceptions with proper JSON response."""
        logger.exception("Unhandled exception: %s", exc)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    # Redirect /docs to versioned docs URL
    @app.get("/docs", include_in_schema=False)
    async def docs_redirect() -> RedirectResponse:
        return RedirectResponse(url=f"{settings.api_v1_prefix}/docs")

    # Root endpoint
    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": settings.project_name,
            "version": settings.version,
            "docs": f"{settings.api_v1_prefix}/docs",
            "health": f"{settings.api_v1_prefix}/health",
        }

    return app


app = create_app()
