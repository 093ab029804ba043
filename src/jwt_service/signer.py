"""
jwt_service.signer

Signing/verification capability backed by PyJWT.

Responsibilities:
- Define the `Signer` protocol the token service depends on.
- Provide `JwtSigner` for HMAC (HS*) and asymmetric (RS*/ES*/PS*) keys.

Note:
- A signer accepts exactly one algorithm; there is no negotiation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

import jwt
from cryptography.hazmat.primitives import serialization

# Only the signature is checked here; temporal claims belong to `Payload.verify`.
_DECODE_OPTIONS: dict[str, Any] = {
    "verify_signature": True,
    "verify_exp": False,
    "verify_nbf": False,
    "verify_iat": False,
    "verify_aud": False,
    "verify_iss": False,
}


class Signer(Protocol):
    @property
    def algorithm(self) -> str: ...

    @property
    def can_sign(self) -> bool: ...

    def sign(self, claims: Mapping[str, Any]) -> bytes: ...

    def verify(self, token: str | bytes) -> dict[str, Any]: ...


@dataclass(frozen=True, slots=True)
class JwtSigner:
    algorithm: str
    verifying_key: Any = field(repr=False)
    # None for verify-only signers (e.g. a peer's public key).
    signing_key: Any = field(default=None, repr=False)

    @classmethod
    def hmac(cls, secret: str | bytes, *, algorithm: str = "HS256") -> JwtSigner:
        if not algorithm.startswith("HS"):
            raise ValueError(f"not an HMAC algorithm: {algorithm}")
        key = secret.encode("utf-8") if isinstance(secret, str) else secret
        return cls(algorithm=algorithm, verifying_key=key, signing_key=key)

    @classmethod
    def from_private_pem(cls, pem: str | bytes, *, algorithm: str = "RS256") -> JwtSigner:
        data = pem.encode("utf-8") if isinstance(pem, str) else pem
        private_key = serialization.load_pem_private_key(data, password=None)
        return cls(
            algorithm=algorithm,
            verifying_key=private_key.public_key(),
            signing_key=private_key,
        )

    @classmethod
    def from_public_pem(cls, pem: str | bytes, *, algorithm: str = "RS256") -> JwtSigner:
        data = pem.encode("utf-8") if isinstance(pem, str) else pem
        return cls(algorithm=algorithm, verifying_key=serialization.load_pem_public_key(data))

    @classmethod
    def from_config(cls, algorithm: str, key: str) -> JwtSigner:
        if algorithm.startswith("HS"):
            return cls.hmac(key, algorithm=algorithm)
        if "PRIVATE KEY" in key:
            return cls.from_private_pem(key, algorithm=algorithm)
        return cls.from_public_pem(key, algorithm=algorithm)

    @property
    def can_sign(self) -> bool:
        return self.signing_key is not None

    def sign(self, claims: Mapping[str, Any]) -> bytes:
        if self.signing_key is None:
            raise ValueError("signer holds a verification key only")
        token = jwt.encode(dict(claims), self.signing_key, algorithm=self.algorithm)
        return token.encode("ascii")

    def verify(self, token: str | bytes) -> dict[str, Any]:
        # Raises jwt.InvalidTokenError subclasses on malformed tokens or bad signatures.
        return jwt.decode(
            token,
            self.verifying_key,
            algorithms=[self.algorithm],
            options=_DECODE_OPTIONS,
        )


# --- Module Notes -----------------------------------------------------------
# Asymmetric keys are parsed with `cryptography` up front so a bad PEM fails at
# startup rather than on the first request.
