"""
tests.test_peer_http

httpx `PeerTokenAuth` attaches tokens a peer service accepts.
"""

from __future__ import annotations

import httpx
import pytest
from starlette.datastructures import Headers

from jwt_service.clients.peer_http import PeerTokenAuth
from jwt_service.errors import Forbidden
from jwt_service.payload import Payload
from jwt_service.service import TokenService
from jwt_service.signer import JwtSigner
from jwt_service.trust import StaticTrustPolicy

BILLING_KEY = "billing-secret"


@pytest.fixture()
def orders() -> TokenService:
    return TokenService(
        verifier=JwtSigner.hmac("orders-secret"),
        identifier="orders",
        policy=StaticTrustPolicy.allow_list({"billing": JwtSigner.hmac(BILLING_KEY)}, ["billing"]),
    )


@pytest.fixture()
def billing() -> TokenService:
    return TokenService(
        verifier=JwtSigner.hmac(BILLING_KEY),
        identifier="billing",
        policy=StaticTrustPolicy.allow_list({}, ["orders"]),
    )


def test_outbound_request_carries_token_peer_accepts(orders, billing) -> None:
    seen: list[Payload] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(billing.decode(Headers(headers=dict(request.headers)), Payload))
        return httpx.Response(200, json={"ok": True})

    auth = PeerTokenAuth(orders, lambda sender: Payload(sender=sender, to="billing"))
    with httpx.Client(transport=httpx.MockTransport(handler), auth=auth) as client:
        r = client.get("http://billing.internal/v1/invoices")
        client.get("http://billing.internal/v1/invoices")

    assert r.status_code == 200
    assert seen == [Payload(sender="orders", to="billing")] * 2


def test_unknown_recipient_fails_before_sending(orders) -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200)

    auth = PeerTokenAuth(orders, lambda sender: Payload(sender=sender, to="ledger"))
    with httpx.Client(transport=httpx.MockTransport(handler), auth=auth) as client:
        with pytest.raises(Forbidden):
            client.get("http://ledger.internal/v1/entries")

    assert calls == []
