"""
jwt_service.service

Token service: inbound verification and outbound issuance.

Responsibilities:
- Decode a bearer token from a request into a typed, trusted `Payload`.
- Encode a payload for a recipient using the key the trust policy provides.
- Collapse every inbound failure into a single `Unauthorized`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, TypeVar

import jwt

from jwt_service.errors import Forbidden, Unauthorized
from jwt_service.observability.logging import get_logger
from jwt_service.payload import Payload
from jwt_service.signer import JwtSigner, Signer
from jwt_service.trust import StaticTrustPolicy, TrustPolicy

if TYPE_CHECKING:
    from jwt_service.settings import Settings

log = get_logger(__name__)

P = TypeVar("P", bound=Payload)

_BEARER_PREFIX = "bearer "


class HeaderSource(Protocol):
    def getlist(self, key: str) -> list[str]: ...


class RequestLike(Protocol):
    @property
    def headers(self) -> HeaderSource: ...


class _Rejected(Exception):
    """Internal inbound rejection; never leaves this module."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def _bearer_token(request: RequestLike | HeaderSource) -> str:
    headers: HeaderSource = getattr(request, "headers", request)
    values = headers.getlist("authorization")
    if not values:
        raise _Rejected("missing_authorization")
    for value in values:
        if value[: len(_BEARER_PREFIX)].lower() == _BEARER_PREFIX:
            return value[len(_BEARER_PREFIX) :]
    raise _Rejected("no_bearer_credentials")


@dataclass(frozen=True, slots=True)
class TokenService:
    """
    verifier:   this service's own key; every inbound token must verify against it
    identifier: expected audience (`to`) inbound and `from` on outbound tokens
    policy:     recipient keys and sender trust
    """

    verifier: Signer = field(repr=False)
    identifier: str
    policy: TrustPolicy

    def __post_init__(self) -> None:
        if not self.identifier:
            raise ValueError("identifier must be non-empty")

    @classmethod
    def from_settings(
        cls, settings: Settings, *, policy: TrustPolicy | None = None
    ) -> TokenService:
        if policy is None:
            policy = StaticTrustPolicy.from_settings(settings)
        return cls(
            verifier=JwtSigner.from_config(settings.verification_alg, settings.verification_key),
            identifier=settings.identifier,
            policy=policy,
        )

    def decode(self, request: RequestLike | HeaderSource, payload_type: type[P]) -> P:
        with self._masked_inbound_failures():
            token = _bearer_token(request)
            try:
                claims = self.verifier.verify(token)
            except jwt.PyJWTError as e:
                raise _Rejected("invalid_token") from e

            try:
                # Alias-only: a token must carry `from`, never the Python name `sender`.
                payload = payload_type.model_validate(claims, by_alias=True, by_name=False)
                payload.verify()
            except ValueError as e:
                # pydantic.ValidationError and PayloadError are both ValueErrors.
                raise _Rejected("invalid_payload") from e

            if payload.to != self.identifier:
                raise _Rejected("audience_mismatch")
            if not self.policy.validate(payload.sender):
                raise _Rejected("untrusted_sender")

        log.debug("token_decoded", sender=payload.sender)
        return payload

    def encode(self, factory: Callable[[str], P]) -> bytes:
        payload = factory(self.identifier)
        key = self.policy.key_for(payload.to)
        # A verify-only key cannot issue tokens for the recipient either.
        if key is None or not key.can_sign:
            log.warning("outbound_token_forbidden", recipient=payload.to)
            raise Forbidden()

        token = key.sign(payload.claims())
        log.debug("token_encoded", recipient=payload.to)
        return token

    @contextmanager
    def _masked_inbound_failures(self) -> Iterator[None]:
        # Single classification point: callers only ever see `Unauthorized`.
        try:
            yield
        except _Rejected as e:
            reason = e.reason
        except (jwt.PyJWTError, ValueError, TypeError):
            reason = "invalid_token"
        else:
            return
        log.info("inbound_token_rejected", reason=reason)
        raise Unauthorized() from None


# --- Module Notes -----------------------------------------------------------
# `Unauthorized` is raised with `from None` so tracebacks rendered for callers do
# not carry signature errors or validation messages.
