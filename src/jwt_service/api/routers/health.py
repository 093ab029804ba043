"""
jwt_service.api.routers.health

Health endpoint.

Responsibilities:
- Provide liveness probe (`/healthz`).
"""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    # Liveness only; the token service has no external dependencies to probe.
    return {"status": "ok"}
