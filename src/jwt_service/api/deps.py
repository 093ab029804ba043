"""
jwt_service.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Expose the app-wide `TokenService` and settings to routes.
- Turn an inbound request into a verified payload of a given type.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from fastapi import Depends, Request

from jwt_service.payload import Payload
from jwt_service.service import TokenService
from jwt_service.settings import Settings

P = TypeVar("P", bound=Payload)


def settings_dep(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[attr-defined]


def token_service_dep(request: Request) -> TokenService:
    # Created once in `jwt_service.api.app.create_app`.
    return request.app.state.token_service  # type: ignore[attr-defined]


def verified_payload(payload_type: type[P]) -> Callable[..., P]:
    def _dep(
        request: Request,
        service: TokenService = Depends(token_service_dep),
    ) -> P:
        # Raises Unauthorized; the app's exception handler renders the 401.
        return service.decode(request, payload_type)

    return _dep


# --- Module Notes -----------------------------------------------------------
# Usage: `payload: MyPayload = Depends(verified_payload(MyPayload))`.
