"""
jwt_service.trust

Delegated trust policy.

Responsibilities:
- Define the `TrustPolicy` protocol (recipient keys + sender trust).
- Provide `StaticTrustPolicy`, a fixed in-memory implementation.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol

from jwt_service.observability.logging import get_logger
from jwt_service.signer import JwtSigner, Signer

if TYPE_CHECKING:
    from jwt_service.settings import Settings

log = get_logger(__name__)


class TrustPolicy(Protocol):
    def key_for(self, recipient: str) -> Signer | None:
        """Signing key for `recipient`; None means we must not send to it."""
        ...

    def validate(self, sender: str) -> bool:
        """Whether `sender` is allowed to talk to this service."""
        ...


@dataclass(frozen=True, slots=True)
class StaticTrustPolicy:
    """
    Two configured modes:
    - allowed_senders is None: open trust, every sender is accepted
    - allowed_senders is a set: exactly those senders are accepted
    """

    keys: Mapping[str, Signer] = field(default_factory=dict)
    allowed_senders: frozenset[str] | None = None

    def __post_init__(self) -> None:
        # Snapshot inputs so later mutation by the caller cannot change policy.
        object.__setattr__(self, "keys", MappingProxyType(dict(self.keys)))
        if self.allowed_senders is not None:
            object.__setattr__(self, "allowed_senders", frozenset(self.allowed_senders))
        else:
            log.warning("open_trust_enabled", recipients=sorted(self.keys))

    @classmethod
    def open(cls, keys: Mapping[str, Signer]) -> StaticTrustPolicy:
        return cls(keys=keys, allowed_senders=None)

    @classmethod
    def allow_list(cls, keys: Mapping[str, Signer], senders: Iterable[str]) -> StaticTrustPolicy:
        return cls(keys=keys, allowed_senders=frozenset(senders))

    @classmethod
    def from_settings(cls, settings: Settings) -> StaticTrustPolicy:
        keys = {
            recipient: JwtSigner.from_config(peer.alg, peer.key)
            for recipient, peer in settings.peers.items()
        }
        if settings.open_trust:
            return cls.open(keys)
        return cls.allow_list(keys, settings.allowed_senders or ())

    def key_for(self, recipient: str) -> Signer | None:
        return self.keys.get(recipient)

    def validate(self, sender: str) -> bool:
        if self.allowed_senders is None:
            return True
        return sender in self.allowed_senders


# --- Module Notes -----------------------------------------------------------
# Dynamic policies (e.g. backed by a registry service) only need `key_for` and
# `validate`; no base class is required.
