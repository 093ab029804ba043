"""
jwt_service.payload

Token claims contract.

Responsibilities:
- Define the base `Payload` model every token type derives from.
- Provide a self-consistency check that runs after signature verification.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from jwt_service.errors import PayloadError


class Payload(BaseModel):
    """
    Claims carried by a service-to-service token.

    `from` is a Python keyword, so the sender claim is exposed as `sender`
    and serialized under its wire name. Subclasses add domain claims and may
    extend `verify` for them (call `super().verify(now=now)` first).
    """

    # Python callers construct by field name; wire claims are validated by alias
    # only (see `TokenService.decode`).
    model_config = ConfigDict(
        frozen=True, validate_by_name=True, validate_by_alias=True, extra="ignore"
    )

    sender: str = Field(alias="from")
    to: str
    # Registered temporal claims (NumericDate: seconds, possibly fractional).
    exp: int | float | None = None
    nbf: int | float | None = None

    def verify(self, *, now: datetime | None = None) -> None:
        ts = (now or datetime.now(tz=UTC)).timestamp()
        if not self.sender:
            raise PayloadError("missing sender")
        if not self.to:
            raise PayloadError("missing recipient")
        if self.exp is not None and ts >= self.exp:
            raise PayloadError("token expired")
        if self.nbf is not None and ts < self.nbf:
            raise PayloadError("token not yet valid")

    def claims(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# --- Module Notes -----------------------------------------------------------
# Payloads are value objects: frozen models compare structurally, so a decoded
# payload equals the one that was signed.
