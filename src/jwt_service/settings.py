"""
jwt_service.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the token service and its host app.
- Hide key material from repr/logging.
- Force the sender trust mode to be chosen explicitly.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PeerKey(BaseModel):
    # Key used to sign tokens addressed to one recipient.
    alg: str = "HS256"
    key: str = Field(repr=False)


class Settings(BaseSettings):
    """
    Trust modes (exactly one must be configured):
    - allowed_senders=["a", "b"]: accept only these senders
    - open_trust=true: accept any sender whose token verifies
    """

    model_config = SettingsConfigDict(env_prefix="JWT_SERVICE_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "jwt-service"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Own identity: audience for inbound tokens, `from` on outbound tokens.
    identifier: str = Field(default="jwt-service", min_length=1)
    verification_alg: str = "HS256"
    verification_key: str = Field(default="dev-secret-change-me", repr=False)

    # Outbound: recipient identifier -> signing key. Missing entry = may not send.
    peers: dict[str, PeerKey] = Field(default_factory=dict)

    # Inbound sender trust.
    allowed_senders: frozenset[str] | None = None
    open_trust: bool = False

    @model_validator(mode="after")
    def _check_trust_mode(self) -> Settings:
        if self.open_trust and self.allowed_senders is not None:
            raise ValueError("open_trust and allowed_senders are mutually exclusive")
        if not self.open_trust and self.allowed_senders is None:
            raise ValueError("configure allowed_senders, or set open_trust=true to accept any sender")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Complex fields are read from env as JSON, e.g.
#   JWT_SERVICE_PEERS='{"billing": {"alg": "HS256", "key": "..."}}'
#   JWT_SERVICE_ALLOWED_SENDERS='["billing", "ledger"]'
