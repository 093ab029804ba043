"""
jwt_service.api.routers.dev_auth

Development helper for minting outbound tokens.

Responsibilities:
- Issue a token from this service to a configured recipient (`/v1/dev/token`).
- Stay hidden in production.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from starlette.status import HTTP_404_NOT_FOUND

from jwt_service.api.deps import settings_dep, token_service_dep
from jwt_service.api.routers.peer import PeerPayload
from jwt_service.service import TokenService
from jwt_service.settings import Settings

router = APIRouter(prefix="/v1/dev", tags=["dev"])


class DevTokenRequest(BaseModel):
    to: str = Field(min_length=1, max_length=256)
    scopes: list[str] = Field(default_factory=list)
    ttl_minutes: int = Field(default=5, ge=1, le=24 * 60)


class DevTokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


@router.post("/token", response_model=DevTokenResponse)
async def mint_dev_token(
    body: DevTokenRequest,
    settings: Settings = Depends(settings_dep),
    service: TokenService = Depends(token_service_dep),
) -> DevTokenResponse:
    if settings.env == "prod":
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Not found")

    expires = datetime.now(tz=UTC) + timedelta(minutes=body.ttl_minutes)
    # Raises Forbidden (403) when the policy has no signing key for `to`.
    token = service.encode(
        lambda sender: PeerPayload(
            sender=sender,
            to=body.to,
            scopes=tuple(body.scopes),
            exp=int(expires.timestamp()),
        )
    )
    return DevTokenResponse(access_token=token.decode("ascii"))
