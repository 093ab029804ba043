"""
tests.conftest

Shared fixtures for token service tests.

Responsibilities:
- Provide HMAC/RSA signers and a recording fake trust policy.
- Build Starlette requests with arbitrary authorization headers.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from starlette.requests import Request

from jwt_service.service import TokenService
from jwt_service.signer import JwtSigner, Signer

IDENTIFIER = "test"
SECRET = "secret"


class FakeTrustPolicy:
    """Records every call; behaviour is driven by the stubs."""

    def __init__(self) -> None:
        self.key_calls: list[str] = []
        self.key_stub: Callable[[str], Signer | None] = lambda _: None
        self.validate_calls: list[str] = []
        self.validate_stub: Callable[[str], bool] = lambda _: True

    def key_for(self, recipient: str) -> Signer | None:
        self.key_calls.append(recipient)
        return self.key_stub(recipient)

    def validate(self, sender: str) -> bool:
        self.validate_calls.append(sender)
        return self.validate_stub(sender)


class RecordingVerifier:
    """Wraps a signer and counts verification attempts."""

    def __init__(self, inner: JwtSigner) -> None:
        self.inner = inner
        self.verify_calls = 0

    @property
    def algorithm(self) -> str:
        return self.inner.algorithm

    @property
    def can_sign(self) -> bool:
        return self.inner.can_sign

    def sign(self, claims):
        return self.inner.sign(claims)

    def verify(self, token):
        self.verify_calls += 1
        return self.inner.verify(token)


@pytest.fixture()
def hs256_signer() -> JwtSigner:
    return JwtSigner.hmac(SECRET)


@pytest.fixture()
def fake_policy() -> FakeTrustPolicy:
    return FakeTrustPolicy()


@pytest.fixture()
def verifier(hs256_signer: JwtSigner) -> RecordingVerifier:
    return RecordingVerifier(hs256_signer)


@pytest.fixture()
def service(verifier: RecordingVerifier, fake_policy: FakeTrustPolicy) -> TokenService:
    return TokenService(verifier=verifier, identifier=IDENTIFIER, policy=fake_policy)


@pytest.fixture()
def make_request() -> Callable[..., Request]:
    def _make(*authorization: str) -> Request:
        scope = {
            "type": "http",
            "method": "GET",
            "path": "/",
            "headers": [(b"authorization", value.encode("latin-1")) for value in authorization],
        }
        return Request(scope)

    return _make


@pytest.fixture(scope="session")
def rsa_pems() -> tuple[str, str]:
    """(private PEM, public PEM) for a fresh RS256 key pair."""
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")
    public_pem = (
        private_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode("ascii")
    )
    return private_pem, public_pem
