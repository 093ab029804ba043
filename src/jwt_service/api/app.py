"""
jwt_service.api.app

FastAPI app factory for a service protected by `TokenService`.

Responsibilities:
- Build the FastAPI application and register routers.
- Construct the token service once and stash it on app.state.
- Map token service errors onto HTTP responses (401/403).
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_401_UNAUTHORIZED

from jwt_service import __version__
from jwt_service.api.routers.dev_auth import router as dev_auth_router
from jwt_service.api.routers.health import router as health_router
from jwt_service.api.routers.peer import router as peer_router
from jwt_service.errors import JwtServiceError
from jwt_service.observability.logging import configure_logging, get_logger
from jwt_service.service import TokenService
from jwt_service.settings import Settings

log = get_logger(__name__)


async def _token_error_handler(_: Request, exc: JwtServiceError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == HTTP_401_UNAUTHORIZED else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=headers,
    )


def create_app(*, settings: Settings, token_service: TokenService | None = None) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    app = FastAPI(
        title="JWT Service",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
    )

    # Built eagerly so key/config errors surface at startup, not on first request.
    app.state.settings = settings
    if token_service is None:
        token_service = TokenService.from_settings(settings)
    app.state.token_service = token_service

    app.add_exception_handler(JwtServiceError, _token_error_handler)
    app.include_router(health_router, tags=["health"])
    app.include_router(peer_router)
    app.include_router(dev_auth_router)

    log.info("app_created", env=settings.env, identifier=token_service.identifier)
    return app


# --- Module Notes -----------------------------------------------------------
# The token service is immutable, so one instance is shared by all requests.
