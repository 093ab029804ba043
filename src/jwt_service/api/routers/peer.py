"""
jwt_service.api.routers.peer

Endpoints called by peer services.

Responsibilities:
- Define the `PeerPayload` token type accepted by this service.
- Echo the verified caller identity (`/v1/peer/whoami`).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from jwt_service.api.deps import verified_payload
from jwt_service.payload import Payload

router = APIRouter(prefix="/v1/peer", tags=["peer"])


class PeerPayload(Payload):
    scopes: tuple[str, ...] = ()


class WhoAmIResponse(BaseModel):
    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)

    sender: str = Field(alias="from")
    to: str
    scopes: list[str] = Field(default_factory=list)


@router.get("/whoami", response_model=WhoAmIResponse)
async def whoami(
    payload: PeerPayload = Depends(verified_payload(PeerPayload)),
) -> WhoAmIResponse:
    return WhoAmIResponse(sender=payload.sender, to=payload.to, scopes=list(payload.scopes))
